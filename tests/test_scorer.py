"""Tests for password strength analysis."""

import math

import pytest

from passcraft.common_passwords import CommonPasswordIndex, get_common_password_index
from passcraft.models import Rating, SuggestionKey, WarningKey
from passcraft.scorer import (
    analyze,
    calculate_diversity_score,
    calculate_entropy,
    calculate_length_score,
    has_common_patterns,
    has_repetitions,
    score_to_rating,
)
from passcraft.validator import character_classes


NO_COMMON = CommonPasswordIndex([])


class TestSubScores:
    @pytest.mark.parametrize("length,expected", [
        (0, 0), (5, 0), (7, 0), (8, 10), (12, 10), (13, 20), (16, 20), (17, 25), (64, 25),
    ])
    def test_length_score(self, length, expected):
        assert calculate_length_score(length) == expected

    def test_diversity_all_classes(self):
        assert calculate_diversity_score(character_classes("Abc123!")) == 30

    def test_diversity_single_class(self):
        assert calculate_diversity_score(character_classes("abc")) == 5

    def test_diversity_three_classes(self):
        assert calculate_diversity_score(character_classes("Abc123")) == 15

    def test_entropy_empty(self):
        assert calculate_entropy("") == (0, 0.0)

    def test_entropy_unknown_characters_only(self):
        assert calculate_entropy("~~~~") == (0, 0.0)

    def test_entropy_lowercase(self):
        score, bits = calculate_entropy("password")
        assert bits == pytest.approx(8 * math.log2(26))
        assert score == 10

    def test_entropy_counts_each_class_once(self):
        _, bits = calculate_entropy("aaaaaaaa")
        _, bits2 = calculate_entropy("abcdefgh")
        assert bits == bits2

    @pytest.mark.parametrize("password,expected", [
        ("abcde", 5),           # 23.5 bits
        ("abcdefgh", 10),       # 37.6 bits
        ("abcdefghij", 15),     # 47.0 bits
        ("Abc123!", 15),        # 43.7 bits
        ("Abc123!xyz", 20),     # 62.5 bits
    ])
    def test_entropy_bands(self, password, expected):
        assert calculate_entropy(password)[0] == expected


class TestPatterns:
    def test_repetitions(self):
        assert has_repetitions("aaa")
        assert has_repetitions("abc111")
        assert not has_repetitions("abc123")
        assert not has_repetitions("aabbaa")
        assert not has_repetitions("ab")
        assert not has_repetitions("")

    def test_common_patterns(self):
        assert has_common_patterns("password")
        assert has_common_patterns("123456")
        assert not has_common_patterns("Xy9$mK2@nP7#qW")

    def test_common_patterns_case_insensitive(self):
        assert has_common_patterns("PassWord")

    def test_password_containing_entry(self):
        assert has_common_patterns("xxDragonxx")

    def test_entry_containing_password(self):
        # "assw" only appears inside longer entries such as "password"
        assert has_common_patterns("assw")

    def test_injected_index(self):
        index = CommonPasswordIndex(["Hunter"])
        assert has_common_patterns("hunter2024!", index)
        assert not has_common_patterns("password", index)


class TestRating:
    @pytest.mark.parametrize("total,expected", [
        (0, Rating.WEAK),
        (40, Rating.WEAK),
        (41, Rating.MEDIUM),
        (60, Rating.MEDIUM),
        (61, Rating.STRONG),
        (80, Rating.STRONG),
        (81, Rating.VERY_STRONG),
        (100, Rating.VERY_STRONG),
    ])
    def test_boundaries(self, total, expected):
        assert score_to_rating(total) == expected


class TestAnalyze:
    def test_mixed_password(self):
        analysis = analyze("Test123!")
        assert analysis.length == 8
        assert analysis.has_lowercase
        assert analysis.has_uppercase
        assert analysis.has_digit
        assert analysis.has_special
        assert analysis.score.total > 0

    def test_common_password(self):
        analysis = analyze("password")
        assert WarningKey.COMMON_PATTERNS in analysis.warnings
        assert SuggestionKey.AVOID_SIMPLE_SEQUENCES in analysis.suggestions
        assert analysis.rating == Rating.WEAK
        # 10 length + 5 diversity + 10 complexity + 10 entropy
        assert analysis.score.total == 35

    def test_empty_password(self):
        analysis = analyze("")
        assert analysis.score.total == 0
        assert analysis.rating == Rating.WEAK
        assert analysis.entropy == 0.0
        assert analysis.length == 0

    def test_strong_password(self):
        analysis = analyze("Xy9$mK2@nP7#qWz4")
        assert analysis.score.length_score == 20
        assert analysis.score.diversity_score == 30
        assert analysis.score.complexity_score == 25
        assert analysis.score.entropy_score == 20
        assert analysis.score.total == 95
        assert analysis.rating == Rating.VERY_STRONG
        assert analysis.warnings == ()
        assert analysis.suggestions == ()

    def test_warning_order(self):
        analysis = analyze("aaa", NO_COMMON)
        assert analysis.warnings == (
            WarningKey.PASSWORD_TOO_SHORT,
            WarningKey.NO_UPPERCASE,
            WarningKey.NO_DIGITS,
            WarningKey.NO_SPECIAL,
            WarningKey.REPETITIONS,
        )
        assert analysis.suggestions == (
            SuggestionKey.LENGTHEN_PASSWORD,
            SuggestionKey.ADD_UPPERCASE,
            SuggestionKey.ADD_DIGITS,
            SuggestionKey.ADD_SPECIAL,
            SuggestionKey.AVOID_REPETITIONS,
        )

    def test_one_suggestion_per_warning(self):
        for password in ["", "a", "password", "AAAA1111", "Xy9$mK2@nP7#qWz4"]:
            analysis = analyze(password)
            assert len(analysis.warnings) == len(analysis.suggestions)

    def test_complexity_without_common_match(self):
        assert analyze("password", NO_COMMON).score.complexity_score == 25

    def test_never_raises_on_odd_input(self):
        for password in ["\x00", "🔑🔑🔑", " " * 100, "ÄÖÜäöü"]:
            analysis = analyze(password)
            assert 0 <= analysis.score.total <= 100

    def test_length_counts_characters_not_bytes(self):
        analysis = analyze("\u00e4" * 8, NO_COMMON)
        assert analysis.length == 8
        assert analysis.score.length_score == 10
        assert analysis.entropy == pytest.approx(8 * math.log2(26))

    def test_rating_is_a_key_not_text(self):
        assert analyze("Test123!").rating.value in {"weak", "medium", "strong", "very_strong"}


class TestCommonPasswordIndex:
    def test_contains_is_exact_and_case_insensitive(self):
        index = CommonPasswordIndex(["Dragon", "  ", "monkey\n"])
        assert len(index) == 2
        assert index.contains("DRAGON")
        assert index.contains("monkey")
        assert not index.contains("dragons")

    def test_contains_substring(self):
        index = CommonPasswordIndex(["dragon"])
        assert index.contains_substring("mydragon1")
        assert index.contains_substring("rag")
        assert not index.contains_substring("knight")

    def test_bundled_index_is_loaded_once(self):
        assert get_common_password_index() is get_common_password_index()
        assert len(get_common_password_index()) >= 9000

    @pytest.mark.parametrize("password", ["metallica", "babygirl", "peaches", "nirvana", "skywalker", "kitten"])
    def test_bundled_list_covers_well_known_passwords(self, password):
        analysis = analyze(password)
        assert WarningKey.COMMON_PATTERNS in analysis.warnings
        assert analysis.score.complexity_score == 10
        assert analysis.rating == Rating.WEAK
