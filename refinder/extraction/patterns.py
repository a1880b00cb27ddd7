import re
from collections.abc import Iterator

from refinder.extraction.exceptions import InvalidPatternError
from refinder.extraction.models import PatternFlag, PatternSpec

_RE_FLAGS: dict[PatternFlag, re.RegexFlag] = {
    PatternFlag.IGNORE_CASE: re.IGNORECASE,
    PatternFlag.MULTILINE: re.MULTILINE,
    PatternFlag.DOT_ALL: re.DOTALL,
    PatternFlag.UNICODE: re.UNICODE,
}


def compile_pattern(spec: PatternSpec) -> re.Pattern[str]:
    """Compile *spec* into a pattern. Global and sticky are iteration modes.

    Raises:
        InvalidPatternError: if the source does not compile, including
            repeat counts too large for the engine and conflicting inline flags.
    """
    re_flags = 0
    for flag in spec.flags:
        re_flags |= _RE_FLAGS.get(flag, 0)
    try:
        return re.compile(spec.source, re_flags)
    except (re.error, OverflowError, ValueError, RecursionError) as exc:
        raise InvalidPatternError(spec.source, str(exc)) from exc


def iter_matches(
    pattern: re.Pattern[str],
    text: str,
    sticky: bool = False,
) -> Iterator[re.Match[str]]:
    """Yield all non-overlapping matches of *pattern* in *text*, left to right.

    In sticky mode each match has to start where the previous one ended,
    and iteration stops at the first position that does not match.
    """
    if not sticky:
        yield from pattern.finditer(text)
        return

    pos = 0
    while pos <= len(text):
        match = pattern.match(text, pos)
        if match is None:
            return
        yield match
        # An empty match would otherwise pin the scan in place.
        pos = match.end() if match.end() > pos else pos + 1
