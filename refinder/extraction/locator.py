import re


def locate_term(
    text: str,
    term: str,
    case_sensitive: bool = False,
    limit: int | None = None,
) -> list[int]:
    """Return start offsets of non-overlapping literal occurrences of *term*."""
    if not term:
        return []
    flags = 0 if case_sensitive else re.IGNORECASE
    offsets: list[int] = []
    for match in re.finditer(re.escape(term), text, flags):
        if limit is not None and len(offsets) >= limit:
            break
        offsets.append(match.start())
    return offsets
