"""
export.py - Write generated passwords to a plain text file.

Layout:

    Generated with passcraft
    Date: 19.10.2026 14:03:59
    Generated passwords:
    <password>
    <password>
    ...

The file is overwritten if it exists. Anyone who can read it can read the
passwords, so callers should put it somewhere private.
"""

import logging
import os
from datetime import datetime
from typing import TYPE_CHECKING, Iterable, Optional

from passcraft.errors import SaveFileError

if TYPE_CHECKING:
    from passcraft.config import Settings

logger = logging.getLogger(__name__)

APP_NAME = "passcraft"


def default_export_name(now: Optional[datetime] = None) -> str:
    """File name used when the caller doesn't pick one, e.g. passwords_19_10_2026.txt"""
    now = now or datetime.now()
    return f"passwords_{now.strftime('%d_%m_%Y')}.txt"


def save_to_file(passwords: Iterable[str], output_path: str, now: Optional[datetime] = None) -> None:
    """
    Save passwords under a short header, one per line.

    Args:
        passwords: Passwords to write, in order
        output_path: Destination file (created or truncated)
        now: Timestamp for the header, defaults to the current local time

    Raises:
        SaveFileError: If the file can't be opened or written
    """
    passwords = list(passwords)
    now = now or datetime.now()
    logger.info("Saving %d passwords to file: %s", len(passwords), output_path)

    header = (
        f"Generated with {APP_NAME}\n"
        f"Date: {now.strftime('%d.%m.%Y %H:%M:%S')}\n"
        "Generated passwords:\n"
    )

    try:
        with open(output_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(header)
            for password in passwords:
                f.write(password + "\n")
    except OSError as e:
        logger.error("Failed to write password file %s: %s", output_path, e)
        raise SaveFileError(f"Failed to write password file: {e}") from e

    logger.info("Successfully saved passwords to file")


def export_passwords(
    passwords: Iterable[str],
    output_dir: str,
    settings: Optional["Settings"] = None,
    save: bool = False,
    file_name: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Optional[str]:
    """
    Save a batch if the caller asked for it or settings.auto_save is on.

    Args:
        passwords: Passwords to write
        output_dir: Directory the export goes into
        settings: Startup settings; only auto_save is read
        save: Explicit request to save, regardless of auto_save
        file_name: Name inside output_dir, defaults to default_export_name()
        now: Timestamp for the header and the default name

    Returns:
        Path of the written file, or None if nothing was saved

    Raises:
        SaveFileError: If the file can't be written
    """
    auto_save = settings.auto_save if settings is not None else False
    if not (save or auto_save):
        return None

    now = now or datetime.now()
    output_path = os.path.join(output_dir, file_name or default_export_name(now))
    save_to_file(passwords, output_path, now=now)
    return output_path
