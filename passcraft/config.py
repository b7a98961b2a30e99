"""
config.py - Startup settings for the generator.

How this works:
1. The application calls load_settings() once at startup
2. The resulting Settings value is passed to generate()/generate_batch()
   explicitly. There is no module-level config object that code reaches into.
3. A missing settings file just means "use the defaults"

The file is TOML with two tables:

    [general]
    default_length = 16
    default_count = 1
    default_mode = "random"
    auto_save = false

    [language]
    lang = "en"

The deterministic seed is never stored here. seed_from_env() reads it from an
environment variable so it does not end up in argv or shell history.
"""

import logging
import os
import tomllib
from dataclasses import dataclass
from typing import Optional

from passcraft.errors import ConfigError, EmptySeedError
from passcraft.generator import MAX_WORDS, MIN_WORDS, MODES
from passcraft.models import GenerationRequest, PhraseRequest, RandomRequest

logger = logging.getLogger(__name__)

# Environment variable the deterministic seed is read from by default
SEED_ENV_VAR = "PASSCRAFT_SEED"


@dataclass(frozen=True)
class Settings:
    default_length: int = 16
    default_count: int = 1
    default_mode: str = "random"
    language: str = "en"
    auto_save: bool = False

    def __post_init__(self):
        if self.default_length < 1:
            raise ConfigError(f"default_length must be positive, got: {self.default_length}")
        if self.default_count < 1:
            raise ConfigError(f"default_count must be positive, got: {self.default_count}")
        if self.default_mode not in MODES:
            raise ConfigError(f"Unknown default_mode {self.default_mode!r}, expected one of {', '.join(MODES)}")

    def default_request(self) -> GenerationRequest:
        """
        Build the request the configured default mode implies.

        Only random and phrase mode can be built from settings alone; pattern
        mode needs a template and deterministic mode needs a seed.
        """
        if self.default_mode == "random":
            return RandomRequest(self.default_length)
        if self.default_mode == "phrase":
            return PhraseRequest(min(max(self.default_length, MIN_WORDS), MAX_WORDS))
        raise ConfigError(f"Mode {self.default_mode!r} needs caller input and has no default request")


def load_settings(path: str) -> Settings:
    """
    Load settings from a TOML file.

    Args:
        path: Location of the settings file

    Returns:
        The parsed Settings, or the defaults if the file does not exist

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or holds
            values of the wrong type
    """
    if not os.path.exists(path):
        logger.info("No settings file at %s, using defaults", path)
        return Settings()

    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.error("Failed to load settings from %s: %s", path, e)
        raise ConfigError(f"Failed to load config: {e}") from e

    general = raw.get("general", {})
    language = raw.get("language", {})
    if not isinstance(general, dict) or not isinstance(language, dict):
        raise ConfigError("Failed to parse config: 'general' and 'language' must be tables")

    defaults = Settings()
    values = {
        "default_length": general.get("default_length", defaults.default_length),
        "default_count": general.get("default_count", defaults.default_count),
        "default_mode": general.get("default_mode", defaults.default_mode),
        "auto_save": general.get("auto_save", defaults.auto_save),
        "language": language.get("lang", defaults.language),
    }

    for key in ("default_length", "default_count"):
        if isinstance(values[key], bool) or not isinstance(values[key], int):
            raise ConfigError(f"Failed to parse config: {key} must be an integer")
    for key in ("default_mode", "language"):
        if not isinstance(values[key], str):
            raise ConfigError(f"Failed to parse config: {key} must be a string")
    if not isinstance(values["auto_save"], bool):
        raise ConfigError("Failed to parse config: auto_save must be true or false")

    return Settings(**values)


def seed_from_env(variable: Optional[str] = None) -> str:
    """
    Read the deterministic-mode seed from the environment.

    Raises:
        EmptySeedError: If the variable is unset or empty
    """
    name = variable or SEED_ENV_VAR
    seed = os.environ.get(name, "")
    if not seed:
        logger.error("Seed environment variable %s is not set or empty", name)
        raise EmptySeedError(f"Environment variable {name} is not set or empty")
    return seed
