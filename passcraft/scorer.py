"""
scorer.py - Password strength analysis.

The score is out of 100 and built from four parts:

    length      0-25   0 up to 7 chars, 10 for 8-12, 20 for 13-16, 25 above
    diversity   0-30   5 per character class present, +10 if all four are
    complexity  0-25   15 if not on/near the common passwords list,
                       10 if no character appears three times in a row
    entropy     0-20   banded on length * log2(pool size)

The pool size only counts the classes actually used (26/26/10/14), so
"aaaaaaaa" and "abcdefgh" get the same entropy. Repeats and known weak
passwords are caught by the complexity checks instead.

analyze() never raises. Any string, including "", gets a full analysis.
"""

import logging
import math
from typing import Optional, Tuple

from passcraft.charsets import CLASS_SIZES
from passcraft.common_passwords import CommonPasswordIndex, get_common_password_index
from passcraft.models import (
    PasswordAnalysis,
    Rating,
    ScoreBreakdown,
    SuggestionKey,
    WarningKey,
)
from passcraft.validator import CharacterClasses, character_classes

logger = logging.getLogger(__name__)

MIN_RECOMMENDED_LENGTH = 8


def calculate_length_score(length: int) -> int:
    if length <= 7:
        return 0
    if length <= 12:
        return 10
    if length <= 16:
        return 20
    return 25


def calculate_diversity_score(classes: CharacterClasses) -> int:
    score = 5 * sum(classes)
    if classes.all_present:
        score += 10
    return score


def has_repetitions(password: str) -> bool:
    """True if any character appears three times in a row."""
    for i in range(len(password) - 2):
        if password[i] == password[i + 1] == password[i + 2]:
            return True
    return False


def has_common_patterns(password: str, index: Optional[CommonPasswordIndex] = None) -> bool:
    """True if the password matches, contains, or is contained in a known weak password."""
    if index is None:
        index = get_common_password_index()
    return index.contains_substring(password)


def calculate_complexity_score(has_common: bool, has_repeats: bool, length: int) -> int:
    # Nothing to credit in an empty password
    if length == 0:
        return 0
    score = 0
    if not has_common:
        score += 15
    if not has_repeats:
        score += 10
    return score


def calculate_entropy(password: str, classes: Optional[CharacterClasses] = None) -> Tuple[int, float]:
    """
    Estimate entropy from the length and the pool of classes used.

    Returns:
        (entropy_score, entropy_bits)
    """
    if classes is None:
        classes = character_classes(password)

    pool_size = 0
    if classes.lowercase:
        pool_size += CLASS_SIZES["lowercase"]
    if classes.uppercase:
        pool_size += CLASS_SIZES["uppercase"]
    if classes.digit:
        pool_size += CLASS_SIZES["digit"]
    if classes.special:
        pool_size += CLASS_SIZES["special"]

    if pool_size == 0:
        return 0, 0.0

    entropy = len(password) * math.log2(pool_size)

    if entropy < 30:
        score = 5
    elif entropy < 40:
        score = 10
    elif entropy < 50:
        score = 15
    else:
        score = 20

    return score, entropy


def score_to_rating(total: int) -> Rating:
    if total <= 40:
        return Rating.WEAK
    if total <= 60:
        return Rating.MEDIUM
    if total <= 80:
        return Rating.STRONG
    return Rating.VERY_STRONG


def analyze(password: str, index: Optional[CommonPasswordIndex] = None) -> PasswordAnalysis:
    """
    Analyze a password's strength.

    Warnings and suggestions come in pairs, one pair per failed check, in
    this order: too short, no lowercase, no uppercase, no digit, no special,
    common pattern, repetition. They are keys, not display text.

    Args:
        password: The password to analyze
        index: Weak-password index to check against, defaults to the bundled list

    Returns:
        PasswordAnalysis with sub-scores, rating, class flags and findings
    """
    length = len(password)
    classes = character_classes(password)
    has_common = has_common_patterns(password, index)
    has_repeats = has_repetitions(password)
    entropy_score, entropy = calculate_entropy(password, classes)

    score = ScoreBreakdown(
        length_score=calculate_length_score(length),
        diversity_score=calculate_diversity_score(classes),
        complexity_score=calculate_complexity_score(has_common, has_repeats, length),
        entropy_score=entropy_score,
    )

    checks = (
        (length < MIN_RECOMMENDED_LENGTH, WarningKey.PASSWORD_TOO_SHORT, SuggestionKey.LENGTHEN_PASSWORD),
        (not classes.lowercase, WarningKey.NO_LOWERCASE, SuggestionKey.ADD_LOWERCASE),
        (not classes.uppercase, WarningKey.NO_UPPERCASE, SuggestionKey.ADD_UPPERCASE),
        (not classes.digit, WarningKey.NO_DIGITS, SuggestionKey.ADD_DIGITS),
        (not classes.special, WarningKey.NO_SPECIAL, SuggestionKey.ADD_SPECIAL),
        (has_common, WarningKey.COMMON_PATTERNS, SuggestionKey.AVOID_SIMPLE_SEQUENCES),
        (has_repeats, WarningKey.REPETITIONS, SuggestionKey.AVOID_REPETITIONS),
    )
    failed = [(warning, suggestion) for hit, warning, suggestion in checks if hit]

    analysis = PasswordAnalysis(
        score=score,
        rating=score_to_rating(score.total),
        has_lowercase=classes.lowercase,
        has_uppercase=classes.uppercase,
        has_digit=classes.digit,
        has_special=classes.special,
        length=length,
        entropy=entropy,
        warnings=tuple(warning for warning, _ in failed),
        suggestions=tuple(suggestion for _, suggestion in failed),
    )

    logger.info(
        "Password analysis completed: rating=%s, score=%d, length=%d, entropy=%.2f",
        analysis.rating.value, score.total, length, entropy,
    )
    return analysis


# --- Self-test ---
if __name__ == "__main__":
    for sample in ["", "password", "Password1", "Test123!", "maple-orbit-river", "Xy9$mK2@nP7#qWz4"]:
        result = analyze(sample)
        print(f"{sample!r:<22} {result.score.total:>3}  {result.rating.value:<12} {result.entropy:6.1f} bits")
        for warning in result.warnings:
            print(f"{'':<22}   - {warning.value}")
