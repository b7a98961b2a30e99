"""
charsets.py - Character classes used by the generator, validator and scorer.

Four disjoint classes: lowercase, uppercase, digits and a fixed set of 14
special characters. CHARSET is their union, in that order, and is what the
random and deterministic modes sample from.
"""

import string


LOWERCASE = string.ascii_lowercase      # a-z
UPPERCASE = string.ascii_uppercase      # A-Z
DIGITS = string.digits                  # 0-9
SPECIAL = "!@#$%^&*()-_=+"

CHARSET = LOWERCASE + UPPERCASE + DIGITS + SPECIAL

# Template letters accepted by pattern mode
PATTERN_CLASSES = {
    "U": UPPERCASE,
    "L": LOWERCASE,
    "D": DIGITS,
    "S": SPECIAL,
}

# Size each class contributes to the entropy pool when present
CLASS_SIZES = {
    "lowercase": len(LOWERCASE),
    "uppercase": len(UPPERCASE),
    "digit": len(DIGITS),
    "special": len(SPECIAL),
}
