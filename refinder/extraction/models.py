from dataclasses import dataclass, field
from enum import Enum

from refinder.extraction.exceptions import InvalidPatternError

# The max amount of unique terms kept from a single extraction.
MAX_RESULTS_LIMIT = 500


class PatternFlag(str, Enum):
    """Match-mode flags, keyed by their single-letter wire form."""

    IGNORE_CASE = "i"
    MULTILINE = "m"
    DOT_ALL = "s"
    UNICODE = "u"
    STICKY = "y"
    GLOBAL = "g"


def parse_flags(source: str, flags: str) -> frozenset[PatternFlag]:
    """Parse a flag string such as ``"gim"``.

    Raises:
        InvalidPatternError: on an unknown or repeated flag letter.
    """
    parsed: set[PatternFlag] = set()
    for letter in flags:
        try:
            flag = PatternFlag(letter)
        except ValueError:
            raise InvalidPatternError(source, f"unknown flag '{letter}'") from None
        if flag in parsed:
            raise InvalidPatternError(source, f"repeated flag '{letter}'")
        parsed.add(flag)
    return frozenset(parsed)


@dataclass(frozen=True)
class PatternSpec:
    """A pattern source, its match-mode flags and the capture group to collect."""

    source: str
    flags: frozenset[PatternFlag] = frozenset()
    capture_group_index: int = 0

    def __post_init__(self) -> None:
        if self.capture_group_index < 0:
            raise InvalidPatternError(
                self.source,
                f"capture group index must be non-negative, got {self.capture_group_index}",
            )

    @classmethod
    def from_flag_string(
        cls,
        source: str,
        flags: str = "",
        capture_group_index: int = 0,
    ) -> "PatternSpec":
        return cls(
            source=source,
            flags=parse_flags(source, flags),
            capture_group_index=capture_group_index,
        )

    @property
    def ignore_case(self) -> bool:
        return PatternFlag.IGNORE_CASE in self.flags

    @property
    def sticky(self) -> bool:
        return PatternFlag.STICKY in self.flags


@dataclass(frozen=True)
class MatchResult:
    """Unique terms in first-occurrence order, bounded by the results limit."""

    terms: tuple[str, ...] = field(default_factory=tuple)
    truncated: bool = False

    @property
    def count(self) -> int:
        return len(self.terms)
