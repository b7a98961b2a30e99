"""
common_passwords.py - Lookup over the list of known-weak passwords.

The scorer only asks two questions of the list:
- contains(word): is this exact password on the list?
- contains_substring(word): does the password contain a listed entry, or
  does a listed entry contain the password?

The second one is a linear scan over every entry. That is fine for a CLI that
checks one password per run. A long-running service would want a set for the
exact lookup and an Aho-Corasick automaton for the substring side.
"""

import logging
import os
import threading
from typing import Iterable, Optional

from passcraft.wordlists import DATA_DIR, read_corpus

logger = logging.getLogger(__name__)

COMMON_PASSWORDS_FILE = os.path.join(DATA_DIR, "common_passwords.txt")


class CommonPasswordIndex:
    """Read-only index over lower-cased weak passwords."""

    def __init__(self, entries: Iterable[str]):
        cleaned = (entry.strip().lower() for entry in entries)
        self._entries = tuple(entry for entry in cleaned if entry)
        self._exact = frozenset(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def contains(self, word: str) -> bool:
        return word.lower() in self._exact

    def contains_substring(self, word: str) -> bool:
        """
        Symmetric containment check, case-insensitive.

        A password matches if it equals an entry, contains an entry, or is
        itself contained in an entry ("pass" matches "password" and
        "xpassword1x" matches "password").
        """
        needle = word.lower()
        if needle in self._exact:
            return True
        for entry in self._entries:
            if entry in needle or needle in entry:
                return True
        return False


_index: Optional[CommonPasswordIndex] = None
_lock = threading.Lock()


def get_common_password_index() -> CommonPasswordIndex:
    """Return the shared index built from the packaged list, loading it once."""
    global _index
    if _index is not None:
        return _index

    with _lock:
        if _index is None:
            _index = CommonPasswordIndex(read_corpus(COMMON_PASSWORDS_FILE))
            logger.info("Loaded %d common passwords", len(_index))
        return _index
