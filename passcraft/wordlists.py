"""
wordlists.py - Per-language word corpora for passphrase generation.

Each supported language ships a plain text file in passcraft/data, one word
per line. A list is read the first time its language is requested and then
kept for the life of the process as an immutable tuple, so concurrent
readers need no locking once it exists. The lock only guards the first load.
"""

import logging
import os
import threading
from typing import Dict, Tuple

logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")

DEFAULT_LANGUAGE = "en"
WORDLIST_FILES = {
    "en": "wordlist_en.txt",
    "de": "wordlist_de.txt",
}

_cache: Dict[str, Tuple[str, ...]] = {}
_lock = threading.Lock()


def read_corpus(path: str) -> Tuple[str, ...]:
    """Read a corpus file: trimmed lines, blank lines dropped, order kept."""
    with open(path, "r", encoding="utf-8") as f:
        return tuple(line.strip() for line in f if line.strip())


def resolve_language(language: str) -> str:
    """Map a locale code onto a shipped wordlist; unknown codes fall back to English."""
    lang = (language or "").strip().lower()
    if lang not in WORDLIST_FILES:
        logger.info("No wordlist for language %r, falling back to %r", language, DEFAULT_LANGUAGE)
        return DEFAULT_LANGUAGE
    return lang


def get_wordlist(language: str = DEFAULT_LANGUAGE) -> Tuple[str, ...]:
    """
    Return the cached word corpus for `language`, loading it on first use.

    Args:
        language: Locale code such as "en" or "de"

    Returns:
        Tuple of words, in file order
    """
    lang = resolve_language(language)
    words = _cache.get(lang)
    if words is not None:
        return words

    with _lock:
        if lang not in _cache:
            path = os.path.join(DATA_DIR, WORDLIST_FILES[lang])
            _cache[lang] = read_corpus(path)
            logger.info("Loaded %d words for language %r", len(_cache[lang]), lang)
        return _cache[lang]
