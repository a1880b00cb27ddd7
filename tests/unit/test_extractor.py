import pytest

from refinder.extraction.exceptions import InvalidPatternError, PatternError
from refinder.extraction.extractor import Extractor
from refinder.extraction.models import MAX_RESULTS_LIMIT, MatchResult, PatternSpec


def _extract(text: str, source: str, flags: str = "", group: int = 0) -> MatchResult:
    spec = PatternSpec.from_flag_string(source, flags, group)
    return Extractor().extract(text, spec)


class TestWholeMatch:
    def test_collects_terms_in_first_occurrence_order(self) -> None:
        result = _extract("3 1 2 1 3", r"\d+")
        assert result.terms == ("3", "1", "2")

    def test_drops_duplicates(self) -> None:
        result = _extract("cat dog cat cat dog", r"\w+")
        assert result.terms == ("cat", "dog")
        assert result.count == 2

    def test_case_sensitive_keeps_case_variants(self) -> None:
        result = _extract("Foo foo FOO", "foo|Foo|FOO")
        assert result.terms == ("Foo", "foo", "FOO")

    def test_case_insensitive_folds_to_lowercase(self) -> None:
        result = _extract("Foo foo FOO", "foo", flags="i")
        assert result.terms == ("foo",)

    def test_trims_surrounding_whitespace(self) -> None:
        result = _extract("ab cd ", r"\w+\s")
        assert result.terms == ("ab", "cd")

    def test_whitespace_only_matches_are_discarded(self) -> None:
        result = _extract("a   b", r"\s+")
        assert result.terms == ()

    def test_empty_pattern_yields_nothing(self) -> None:
        assert _extract("abc", "").terms == ()


class TestEmptyInput:
    def test_empty_document_gives_empty_result(self) -> None:
        result = _extract("", r"\w+")
        assert result == MatchResult()
        assert result.truncated is False

    def test_no_matches_gives_empty_result(self) -> None:
        result = _extract("letters only", r"\d+")
        assert result.terms == ()
        assert result.count == 0


class TestCaptureGroups:
    def test_non_participating_group_is_skipped(self) -> None:
        result = _extract("1 2x 3", r"(\d+)(x)?", group=2)
        assert result.terms == ("x",)

    def test_selects_requested_group(self) -> None:
        result = _extract("id=7 id=42 id=7", r"id=(\d+)", group=1)
        assert result.terms == ("7", "42")

    def test_group_index_above_group_count_collects_nothing(self) -> None:
        result = _extract("1 2 3", r"(\d)", group=2)
        assert result.terms == ()
        assert result.truncated is False

    def test_group_index_on_pattern_without_groups_collects_nothing(self) -> None:
        assert _extract("abc", "b", group=1).terms == ()


class TestFlags:
    def test_multiline_anchors_each_line(self) -> None:
        assert _extract("one\ntwo", r"^\w+", flags="m").terms == ("one", "two")
        assert _extract("one\ntwo", r"^\w+").terms == ("one",)

    def test_dot_all_crosses_newlines(self) -> None:
        assert _extract("a\nb", "a.b", flags="s").terms == ("a\nb",)
        assert _extract("a\nb", "a.b").terms == ()

    def test_sticky_stops_at_first_gap(self) -> None:
        assert _extract("12a3", r"\d", flags="y").terms == ("1", "2")
        assert _extract("12a3", r"\d").terms == ("1", "2", "3")

    def test_sticky_requires_match_at_start(self) -> None:
        assert _extract("a1", r"\d", flags="y").terms == ()

    def test_global_flag_is_accepted(self) -> None:
        assert _extract("a b", r"\w", flags="g").terms == ("a", "b")


class TestResultsLimit:
    def test_truncates_when_more_terms_exist(self) -> None:
        text = " ".join(f"w{i}" for i in range(MAX_RESULTS_LIMIT + 100))
        result = _extract(text, r"w\d+")
        assert result.count == MAX_RESULTS_LIMIT
        assert result.truncated is True
        assert result.terms[0] == "w0"
        assert result.terms[-1] == f"w{MAX_RESULTS_LIMIT - 1}"

    def test_exactly_at_limit_is_not_truncated(self) -> None:
        text = " ".join(f"w{i}" for i in range(MAX_RESULTS_LIMIT))
        result = _extract(text, r"w\d+")
        assert result.count == MAX_RESULTS_LIMIT
        assert result.truncated is False

    def test_duplicates_after_limit_do_not_truncate(self) -> None:
        extractor = Extractor(max_results=3)
        spec = PatternSpec.from_flag_string(r"\w")
        result = extractor.extract("a b c a b c", spec)
        assert result.terms == ("a", "b", "c")
        assert result.truncated is False

    def test_custom_limit(self) -> None:
        extractor = Extractor(max_results=2)
        result = extractor.extract("a b c", PatternSpec.from_flag_string(r"\w"))
        assert result.terms == ("a", "b")
        assert result.truncated is True

    def test_non_positive_limit_raises(self) -> None:
        with pytest.raises(ValueError, match="max_results"):
            Extractor(max_results=0)


class TestInvalidPattern:
    def test_unclosed_group_raises(self) -> None:
        spec = PatternSpec.from_flag_string("(unclosed")
        with pytest.raises(InvalidPatternError) as exc_info:
            Extractor().extract("abc", spec)
        assert exc_info.value.source == "(unclosed"
        assert isinstance(exc_info.value, PatternError)

    @pytest.mark.parametrize(
        ("source", "flags"),
        [
            ("a{4294967296}", ""),
            ("(?a)a", "u"),
        ],
    )
    def test_engine_rejections_become_invalid_pattern(self, source: str, flags: str) -> None:
        spec = PatternSpec.from_flag_string(source, flags)
        with pytest.raises(InvalidPatternError) as exc_info:
            Extractor().extract("aaa", spec)
        assert exc_info.value.source == source
        assert exc_info.value.reason


class TestInlineFlags:
    def test_inline_ignore_case_folds_terms(self) -> None:
        result = _extract("Foo foo FOO", "(?i)foo")
        assert result.terms == ("foo",)

    def test_scoped_inline_flag_does_not_fold(self) -> None:
        result = _extract("Foo foo FOO", "(?i:foo)")
        assert result.terms == ("Foo", "foo", "FOO")
