"""
models.py - Request and result types shared by the generator and the scorer.

Requests are frozen dataclasses, one per generation mode. A GenerationRequest
is any one of them; the generator dispatches on the concrete type.

Analysis results carry structured facts only: numbers, booleans, a Rating
and the warning/suggestion keys. Turning those into human-readable,
translated text is the job of whatever UI sits on top.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class RandomRequest:
    length: int


@dataclass(frozen=True)
class PatternRequest:
    template: str


@dataclass(frozen=True)
class PhraseRequest:
    word_count: int


@dataclass(frozen=True)
class DeterministicRequest:
    """
    Derive a password from a seed.

    The seed should come from the environment (see config.seed_from_env),
    not from a command-line argument, so it stays out of shell history.
    """
    seed: str
    salt: Optional[str] = None
    service: Optional[str] = None

    def __repr__(self) -> str:
        # Keep the seed out of logs and tracebacks
        return f"DeterministicRequest(seed=<{len(self.seed)} chars>, salt={self.salt!r}, service={self.service!r})"


GenerationRequest = Union[RandomRequest, PatternRequest, PhraseRequest, DeterministicRequest]


class Rating(str, Enum):
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very_strong"


class WarningKey(str, Enum):
    PASSWORD_TOO_SHORT = "password_too_short"
    NO_LOWERCASE = "no_lowercase"
    NO_UPPERCASE = "no_uppercase"
    NO_DIGITS = "no_digits"
    NO_SPECIAL = "no_special"
    COMMON_PATTERNS = "common_patterns"
    REPETITIONS = "repetitions"


class SuggestionKey(str, Enum):
    LENGTHEN_PASSWORD = "lengthen_password"
    ADD_LOWERCASE = "add_lowercase"
    ADD_UPPERCASE = "add_uppercase"
    ADD_DIGITS = "add_digits"
    ADD_SPECIAL = "add_special"
    AVOID_SIMPLE_SEQUENCES = "avoid_simple_sequences"
    AVOID_REPETITIONS = "avoid_repetitions"


@dataclass(frozen=True)
class ScoreBreakdown:
    length_score: int
    diversity_score: int
    complexity_score: int
    entropy_score: int

    @property
    def total(self) -> int:
        return self.length_score + self.diversity_score + self.complexity_score + self.entropy_score


@dataclass(frozen=True)
class PasswordAnalysis:
    score: ScoreBreakdown
    rating: Rating
    has_lowercase: bool
    has_uppercase: bool
    has_digit: bool
    has_special: bool
    length: int
    entropy: float
    warnings: Tuple[WarningKey, ...]
    suggestions: Tuple[SuggestionKey, ...]
