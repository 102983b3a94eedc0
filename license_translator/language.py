#!/usr/bin/env python3
# ABOUTME: Supported target languages for license translation.
# ABOUTME: Maps language codes to display names and groups them for the help listing.

from types import MappingProxyType
from typing import Iterator, Mapping, Tuple


class LanguageHandler:
    """Lookup utilities for the fixed table of supported language codes."""

    # Major Indian Constitutional Languages (Schedule VIII)
    SCHEDULE_VIII_CODES: Tuple[str, ...] = (
        "as", "bn", "gu", "hi", "kn", "ks", "kok", "ml", "mni", "mr", "ne",
        "or", "pa", "sa", "sd", "ta", "te", "ur", "brx", "sat", "mai", "doi",
    )

    # Recommended International Languages
    INTERNATIONAL_CODES: Tuple[str, ...] = (
        "es", "fr", "de", "zh-CN", "zh-TW", "ja", "ko", "ar", "ru", "pt",
        "it", "nl", "tr", "vi", "th", "id", "pl", "sv",
    )

    LANGUAGES: Mapping[str, str] = MappingProxyType({
        "as": "Assamese",
        "bn": "Bengali",
        "gu": "Gujarati",
        "hi": "Hindi",
        "kn": "Kannada",
        "ks": "Kashmiri",
        "kok": "Konkani",
        "ml": "Malayalam",
        "mni": "Manipuri",
        "mr": "Marathi",
        "ne": "Nepali",
        "or": "Odia",
        "pa": "Punjabi",
        "sa": "Sanskrit",
        "sd": "Sindhi",
        "ta": "Tamil",
        "te": "Telugu",
        "ur": "Urdu",
        "brx": "Bodo",
        "sat": "Santhali",
        "mai": "Maithili",
        "doi": "Dogri",
        "es": "Spanish",
        "fr": "French",
        "de": "German",
        "zh-CN": "Chinese (Simplified)",
        "zh-TW": "Chinese (Traditional)",
        "ja": "Japanese",
        "ko": "Korean",
        "ar": "Arabic",
        "ru": "Russian",
        "pt": "Portuguese",
        "it": "Italian",
        "nl": "Dutch",
        "tr": "Turkish",
        "vi": "Vietnamese",
        "th": "Thai",
        "id": "Indonesian",
        "pl": "Polish",
        "sv": "Swedish",
    })

    LANGUAGE_GROUPS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
        ("Indian Constitutional Languages (Schedule VIII)", SCHEDULE_VIII_CODES),
        ("International Languages", INTERNATIONAL_CODES),
    )

    @classmethod
    def is_language_supported(cls, language_code: str) -> bool:
        """Check whether a language code is in the supported table.

        The lookup is exact and case-sensitive, so "zh-CN" is supported
        while "zh-cn" is not.

        Args:
            language_code: The language code supplied by the user

        Returns:
            True if the code can be used as a translation target
        """
        return language_code in cls.LANGUAGES

    @classmethod
    def get_language_name(cls, language_code: str) -> str:
        """Return the display name for a supported language code.

        Raises:
            KeyError: If the code is not supported
        """
        return cls.LANGUAGES[language_code]

    @classmethod
    def iter_numbered(cls) -> Iterator[Tuple[int, str, str]]:
        """Yield (number, code, name) for every language in listing order."""
        number = 0
        for _title, codes in cls.LANGUAGE_GROUPS:
            for code in codes:
                number += 1
                yield number, code, cls.LANGUAGES[code]
