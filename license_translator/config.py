#!/usr/bin/env python3
# ABOUTME: Configuration for the lingo.dev translation service.
# ABOUTME: Holds fixed endpoint details and resolves the API key from env and .env files.

import os
from typing import List, Optional, Tuple

from dotenv import load_dotenv


class LingoConfig:
    """Configuration for the lingo.dev translation service."""

    SOURCE_FILE: str = "LICENSE.en-US"
    SOURCE_LANGUAGE: str = "en-US"

    API_URL: str = "https://api.lingo.dev/v1/translate"
    API_KEY_ENV: str = "LINGO_API_KEY"
    API_URL_ENV: str = "LINGO_API_URL"
    SIGNUP_URL: str = "https://lingo.dev"

    # Primary field first, fallback second
    RESPONSE_FIELDS: Tuple[str, ...] = ("translated_text", "translation")

    ALTERNATIVE_PROVIDERS: Tuple[str, ...] = (
        "Google Translate API",
        "DeepL API",
        "LibreTranslate (self-hosted)",
        "Any other translation service",
    )

    @staticmethod
    def get_config_paths() -> List[str]:
        """Get a list of possible configuration file paths.

        Returns:
            A list of possible .env file paths in order of precedence.
        """
        paths = []

        # Current directory
        paths.append(os.path.join(os.getcwd(), ".env"))

        # User config directories
        home_dir = os.path.expanduser("~")
        paths.append(os.path.join(home_dir, ".4license", ".env"))
        paths.append(os.path.join(home_dir, ".config", "4license", ".env"))

        return paths

    @classmethod
    def load_environment(cls) -> None:
        """Load every existing .env file without overriding the process environment.

        Files earlier in get_config_paths() win, since load_dotenv never
        replaces a variable that is already set.
        """
        for env_path in cls.get_config_paths():
            if os.path.isfile(env_path):
                load_dotenv(env_path, override=False)

    @classmethod
    def get_api_key(cls) -> Optional[str]:
        """Return the lingo.dev API key, or None when it is not configured."""
        cls.load_environment()
        return os.getenv(cls.API_KEY_ENV) or None

    @classmethod
    def get_api_url(cls) -> str:
        """Return the translation endpoint, honouring LINGO_API_URL if set."""
        return os.getenv(cls.API_URL_ENV) or cls.API_URL
