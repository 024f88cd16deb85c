"""Tests for wren.search.fuzzy — approximate substring alignment."""

from wren.search.fuzzy import Alignment, best_alignment, token_score


class TestBestAlignment:
    def test_exact_occurrence(self) -> None:
        assert best_alignment("go", "let's go") == Alignment(errors=0, start=6, end=8)

    def test_earliest_exact_occurrence(self) -> None:
        assert best_alignment("ab", "xxabab") == Alignment(errors=0, start=2, end=4)

    def test_transposition_is_one_error(self) -> None:
        alignment = best_alignment("pyhton", "learning python")

        assert alignment is not None
        assert alignment.errors == 1
        assert alignment.start == 9
        assert alignment.length == 6

    def test_substitution(self) -> None:
        alignment = best_alignment("rost", "rust notes")
        assert alignment is not None
        assert alignment.errors == 1

    def test_missing_character(self) -> None:
        alignment = best_alignment("pythn", "python")
        assert alignment is not None
        assert alignment.errors == 1

    def test_empty_pattern(self) -> None:
        assert best_alignment("", "anything") is None

    def test_empty_text(self) -> None:
        alignment = best_alignment("go", "")
        assert alignment is not None
        assert alignment.errors == 2


class TestTokenScore:
    def test_exact(self) -> None:
        hit = token_score("python", "intro to python", threshold=0.3, min_match_length=2)
        assert hit is not None
        assert hit[0] == 0.0

    def test_typo_within_threshold(self) -> None:
        hit = token_score("pyhton", "python", threshold=0.3, min_match_length=2)
        assert hit is not None
        assert hit[0] == 1 / 6

    def test_above_threshold(self) -> None:
        assert token_score("go", "travel notes", threshold=0.3, min_match_length=2) is None

    def test_unrelated(self) -> None:
        assert token_score("kotlin", "python", threshold=0.3, min_match_length=2) is None

    def test_threshold_is_inclusive(self) -> None:
        hit = token_score("abcd", "abxd", threshold=0.25, min_match_length=2)
        assert hit is not None
        assert hit[0] == 0.25

    def test_short_span_rejected(self) -> None:
        assert token_score("a", "cat", threshold=0.3, min_match_length=2) is None
