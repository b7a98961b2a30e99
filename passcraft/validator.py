"""
validator.py - The four-class diversity check.

A candidate is accepted by the random and deterministic generators only if it
contains at least one lowercase letter, one uppercase letter, one digit and
one of the special characters from charsets.SPECIAL.
"""

from typing import NamedTuple

from passcraft.charsets import DIGITS, SPECIAL


class CharacterClasses(NamedTuple):
    lowercase: bool
    uppercase: bool
    digit: bool
    special: bool

    @property
    def all_present(self) -> bool:
        return self.lowercase and self.uppercase and self.digit and self.special


def character_classes(candidate: str) -> CharacterClasses:
    """Report which of the four character classes appear in `candidate`."""
    has_lower = has_upper = has_digit = has_special = False

    for c in candidate:
        if c.islower():
            has_lower = True
        elif c.isupper():
            has_upper = True
        elif c in DIGITS:
            has_digit = True
        elif c in SPECIAL:
            has_special = True

    return CharacterClasses(has_lower, has_upper, has_digit, has_special)


def is_valid(candidate: str) -> bool:
    """True if all four character classes are present."""
    return character_classes(candidate).all_present
