"""
generator.py - Password generation in four modes.

How this works:
1. random: sample every character independently from the full 76-character
   set, retry (up to 100 times) until all four character classes show up
2. pattern: a template like "ULLDDS" fixes the class of each position
   (Upper, Lower, Digit, Special). The template is taken at face value, so
   the result is NOT forced to contain every class
3. phrase: pick words from the active language's wordlist, with replacement,
   and join them with "-"
4. deterministic: derive the password from a seed with HKDF-SHA256, so the
   same (seed, salt, service) always gives the same 20-character password.
   If the derived candidate misses a character class, the retry counter is
   mixed into the HKDF label and we expand again. Still no randomness
   involved, so the retry sequence is identical on every run.

All randomness goes through random_source, which reads the OS CSPRNG.
Nothing in this module logs a generated password or a seed.
"""

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence

from passcraft import kdf
from passcraft.charsets import CHARSET, PATTERN_CLASSES
from passcraft.errors import (
    EmptyPatternError,
    EmptySeedError,
    EmptyWordlistError,
    InvalidCountError,
    InvalidLengthError,
    InvalidPatternCharacterError,
    InvalidWordCountError,
    MaxRetriesExceededError,
)
from passcraft.models import (
    DeterministicRequest,
    GenerationRequest,
    PatternRequest,
    PhraseRequest,
    RandomRequest,
)
from passcraft.random_source import choice
from passcraft.validator import is_valid
from passcraft.wordlists import DEFAULT_LANGUAGE, get_wordlist

if TYPE_CHECKING:
    from passcraft.config import Settings

logger = logging.getLogger(__name__)

MODES = ("random", "pattern", "phrase", "deterministic")

MIN_LENGTH = 8
MAX_LENGTH = 64
RANDOM_MAX_RETRIES = 100

MIN_WORDS = 3
MAX_WORDS = 20
PHRASE_SEPARATOR = "-"

DEFAULT_SALT = "passcraft"
DETERMINISTIC_LENGTH = 20
DETERMINISTIC_MAX_RETRIES = 1000
# Each retry starts reading the HKDF block at a different offset
OFFSET_STEP = 13


def generate_random(length: int) -> str:
    """
    Generate a random password containing all four character classes.

    Args:
        length: Password length, 8 to 64

    Returns:
        The generated password

    Raises:
        InvalidLengthError: If length is out of range
        MaxRetriesExceededError: If no valid candidate turned up in 100 tries
        RandomBytesError: If the OS random source fails
    """
    logger.info("Generating random password with length: %d", length)

    if not MIN_LENGTH <= length <= MAX_LENGTH:
        logger.error("Password length must be between %d and %d, got: %d", MIN_LENGTH, MAX_LENGTH, length)
        raise InvalidLengthError(length, MIN_LENGTH, MAX_LENGTH)

    for attempt in range(RANDOM_MAX_RETRIES):
        password = "".join(choice(CHARSET) for _ in range(length))
        if is_valid(password):
            logger.info("Successfully generated random password (attempt %d)", attempt + 1)
            return password

    logger.error("Failed to generate valid password after %d attempts", RANDOM_MAX_RETRIES)
    raise MaxRetriesExceededError("random", RANDOM_MAX_RETRIES)


def generate_pattern(template: str) -> str:
    """
    Generate a password whose positions follow `template`.

    U = uppercase, L = lowercase, D = digit, S = special. "UDDL" gives
    something like "K47p".

    Raises:
        EmptyPatternError: If the template is empty
        InvalidPatternCharacterError: On the first character outside U/L/D/S
    """
    logger.info("Generating pattern password with pattern: %s", template)

    if not template:
        logger.error("Pattern cannot be empty")
        raise EmptyPatternError()

    chars = []
    for c in template:
        charset = PATTERN_CLASSES.get(c)
        if charset is None:
            logger.error("Invalid pattern character: %r", c)
            raise InvalidPatternCharacterError(c)
        chars.append(choice(charset))

    logger.info("Successfully generated pattern password")
    return "".join(chars)


def generate_phrase(
    word_count: int,
    language: str = DEFAULT_LANGUAGE,
    wordlist: Optional[Sequence[str]] = None,
) -> str:
    """
    Generate a passphrase like "maple-orbit-candle-river".

    Words are drawn uniformly and independently, so the same word can appear
    twice. No class-diversity check is applied.

    Args:
        word_count: Number of words, 3 to 20
        language: Locale whose wordlist to use (ignored when `wordlist` is given)
        wordlist: Explicit word source, mainly for callers with their own corpus

    Raises:
        InvalidWordCountError: If word_count is out of range
        EmptyWordlistError: If the word source has no words
    """
    logger.info("Generating phrase password with %d words", word_count)

    if not MIN_WORDS <= word_count <= MAX_WORDS:
        logger.error("Word count must be between %d and %d, got: %d", MIN_WORDS, MAX_WORDS, word_count)
        raise InvalidWordCountError(word_count, MIN_WORDS, MAX_WORDS)

    words = get_wordlist(language) if wordlist is None else wordlist
    if not words:
        logger.error("Wordlist is empty")
        raise EmptyWordlistError(language)

    phrase = PHRASE_SEPARATOR.join(choice(words) for _ in range(word_count))
    logger.info("Successfully generated phrase password")
    return phrase


def generate_deterministic(seed: str, salt: Optional[str] = None, service: Optional[str] = None) -> str:
    """
    Derive a 20-character password from a seed.

    Identical (seed, salt, service) always give the identical password, and
    changing any one of them changes it. Use `service` to get a different
    password per site from one seed.

    Args:
        seed: Secret seed text, must not be empty
        salt: HKDF salt, defaults to DEFAULT_SALT
        service: Optional service name mixed into the HKDF label

    Returns:
        A 20-character password containing all four character classes

    Raises:
        EmptySeedError: If seed is empty
        KeyDerivationError: If HKDF expansion fails
        MaxRetriesExceededError: If 1000 expansions gave no valid candidate
    """
    logger.info(
        "Generating deterministic password (seed length: %d, salt: %s, service: %s)",
        len(seed), salt is not None, service is not None,
    )

    if not seed:
        logger.error("Seed cannot be empty")
        raise EmptySeedError()

    salt_bytes = (DEFAULT_SALT if salt is None else salt).encode("utf-8")
    prk = kdf.hkdf_extract(salt_bytes, seed.encode("utf-8"))

    for retry in range(DETERMINISTIC_MAX_RETRIES):
        output = kdf.hkdf_expand(prk, kdf.build_info(retry, service), kdf.HASH_LENGTH)
        password = map_to_charset(output, retry)
        if is_valid(password):
            logger.info("Successfully generated deterministic password (retry %d)", retry)
            return password

    logger.error("Failed to generate valid deterministic password after %d retries", DETERMINISTIC_MAX_RETRIES)
    raise MaxRetriesExceededError("deterministic", DETERMINISTIC_MAX_RETRIES)


def map_to_charset(block: bytes, retry: int, length: int = DETERMINISTIC_LENGTH) -> str:
    """Turn an HKDF output block into `length` charset characters, starting at the retry's offset."""
    size = len(block)
    offset = (retry * OFFSET_STEP) % size
    return "".join(CHARSET[block[(offset + i) % size] % len(CHARSET)] for i in range(length))


def generate(request: GenerationRequest, settings: Optional["Settings"] = None) -> str:
    """
    Generate one password for any request type.

    `settings` supplies the phrase language; without it English is used.
    """
    if isinstance(request, RandomRequest):
        return generate_random(request.length)
    if isinstance(request, PatternRequest):
        return generate_pattern(request.template)
    if isinstance(request, PhraseRequest):
        language = settings.language if settings is not None else DEFAULT_LANGUAGE
        return generate_phrase(request.word_count, language)
    if isinstance(request, DeterministicRequest):
        return generate_deterministic(request.seed, request.salt, request.service)
    raise TypeError(f"Unsupported generation request: {type(request).__name__}")


def generate_batch(
    request: GenerationRequest,
    count: Optional[int] = None,
    settings: Optional["Settings"] = None,
) -> List[str]:
    """
    Generate `count` passwords for the same request.

    Fail-fast: the first error propagates and nothing generated so far is
    returned. Deterministic requests return the same password `count` times.

    Args:
        request: What to generate
        count: How many, defaults to settings.default_count (or 1)
        settings: Startup settings, see config.load_settings

    Raises:
        InvalidCountError: If count is below 1
        GeneratorError: Whatever the first failing generation raised
    """
    if count is None:
        count = settings.default_count if settings is not None else 1
    if count < 1:
        logger.error("Password count must be at least 1, got: %d", count)
        raise InvalidCountError(count)

    logger.info("Generating batch of %d passwords", count)
    return [generate(request, settings) for _ in range(count)]
