"""Pattern-driven term extraction.

For every match the selected text (whole match or one capture group) is
case-folded when the compiled pattern ignores case, whether through the `i`
flag or a leading inline `(?i)`. It is then trimmed and kept only if it is
non-empty and not already collected. Collection stops once the results
limit is reached and one more distinct term has been seen.
"""

import re

from refinder.extraction.models import MAX_RESULTS_LIMIT, MatchResult, PatternSpec
from refinder.extraction.patterns import compile_pattern, iter_matches
from refinder.logging.logger import Log


class Extractor:
    """Collects unique matching terms from document text."""

    def __init__(self, max_results: int = MAX_RESULTS_LIMIT) -> None:
        if max_results < 1:
            raise ValueError(f"max_results must be positive, got {max_results}")
        self._max_results = max_results

    @property
    def max_results(self) -> int:
        return self._max_results

    def extract(self, document_text: str, spec: PatternSpec) -> MatchResult:
        """Scan *document_text* for *spec* and return the unique terms found.

        Raises:
            InvalidPatternError: if the pattern does not compile. Nothing is
                extracted in that case.
        """
        pattern = compile_pattern(spec)
        if spec.capture_group_index > pattern.groups:
            Log.warning(
                "Capture group index exceeds the pattern's groups, nothing will be collected",
                source=spec.source,
                capture_group_index=spec.capture_group_index,
                groups=pattern.groups,
            )
            return MatchResult()

        terms: list[str] = []
        seen: set[str] = set()
        truncated = False
        fold_case = bool(pattern.flags & re.IGNORECASE)
        for match in iter_matches(pattern, document_text, sticky=spec.sticky):
            term = self._select_term(match, spec.capture_group_index, fold_case)
            if term is None or term in seen:
                continue
            if len(terms) >= self._max_results:
                truncated = True
                break
            seen.add(term)
            terms.append(term)

        return MatchResult(terms=tuple(terms), truncated=truncated)

    @staticmethod
    def _select_term(match: re.Match[str], group: int, fold_case: bool) -> str | None:
        text = match.group(group)
        # Optional group that did not take part in this match.
        if text is None:
            return None
        if fold_case:
            text = text.lower()
        return text.strip() or None
