"""
errors.py - Exception types raised by the generator, scorer collaborators and config.

Every failure is terminal for the call that raised it. The generator performs
its own bounded retries internally; anything that escapes is final and is
meant to be surfaced to the caller unchanged.

The input-validation errors also subclass ValueError so callers that only
care about "bad argument" can keep catching that.
"""


class PasscraftError(Exception):
    """Base class for everything this package raises on purpose."""


class GeneratorError(PasscraftError):
    """A password could not be generated."""


class InvalidLengthError(GeneratorError, ValueError):
    def __init__(self, length: int, minimum: int, maximum: int):
        self.length = length
        super().__init__(f"Password length must be between {minimum} and {maximum}, got: {length}")


class EmptyPatternError(GeneratorError, ValueError):
    def __init__(self):
        super().__init__("Pattern cannot be empty")


class InvalidPatternCharacterError(GeneratorError, ValueError):
    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Invalid pattern character: '{char}'. Only U, L, D, S are allowed")


class InvalidWordCountError(GeneratorError, ValueError):
    def __init__(self, word_count: int, minimum: int, maximum: int):
        self.word_count = word_count
        super().__init__(f"Word count must be between {minimum} and {maximum}, got: {word_count}")


class InvalidCountError(GeneratorError, ValueError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Password count must be at least 1, got: {count}")


class EmptyWordlistError(GeneratorError):
    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Wordlist for language '{language}' is empty")


class EmptySeedError(GeneratorError, ValueError):
    def __init__(self, detail: str = "Seed cannot be empty"):
        super().__init__(detail)


class MaxRetriesExceededError(GeneratorError):
    def __init__(self, mode: str, attempts: int):
        self.mode = mode
        self.attempts = attempts
        super().__init__(f"Failed to generate a valid {mode} password after {attempts} attempts")


class RandomBytesError(GeneratorError):
    """The OS random number generator failed. Never retried."""


class KeyDerivationError(GeneratorError):
    """HKDF expand (or filling its output) failed."""


class SaveFileError(PasscraftError):
    """Writing the password export file failed."""


class ConfigError(PasscraftError):
    """The settings file is unreadable or holds invalid values."""
