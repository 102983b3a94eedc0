#!/usr/bin/env python3
# ABOUTME: Translation service providers for the license translator.
# ABOUTME: Implements the lingo.dev HTTP request and response handling.

import json
from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple, Union

import requests

from license_translator.config import LingoConfig


class TranslationProvider(ABC):
    """Abstract base class for translation providers."""

    @abstractmethod
    def translate_text(
        self, text: str, target_language: str
    ) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        """Translate text using the provider's API.

        Returns:
            A tuple of (translated_text, response_body, error_msg). A transport
            failure sets error_msg; a completed request that yielded no
            translation leaves translated_text None with the raw body.
        """
        pass


class LingoProvider(TranslationProvider):
    """lingo.dev API provider implementation."""

    def __init__(self, api_key: str, api_url: str = LingoConfig.API_URL):
        self.api_key = api_key
        self.api_url = api_url

    @staticmethod
    def build_payload(text: str, target_language: str) -> Dict[str, str]:
        """Build the JSON request body."""
        return {
            "source_language": LingoConfig.SOURCE_LANGUAGE,
            "target_language": target_language,
            "text": text,
        }

    def build_headers(self) -> Dict[str, str]:
        """Build the request headers with bearer authentication."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def translate_text(
        self, text: str, target_language: str
    ) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        """Translate text using the lingo.dev API.

        A single POST is issued with no retry. HTTP error statuses are not
        treated as transport failures: their body goes through the same
        extraction as a success and is reported back to the caller.
        """
        try:
            response = requests.post(
                self.api_url,
                headers=self.build_headers(),
                json=self.build_payload(text, target_language),
            )
        except requests.RequestException as e:
            return None, None, str(e)

        # The body is always UTF-8, whatever charset the Content-Type header implies
        body = response.content.decode("utf-8", errors="replace")
        return self.extract_translation(response.content), body, None

    @staticmethod
    def extract_translation(body: Union[str, bytes]) -> Optional[str]:
        """Pull the translated text out of a response body.

        The first field in LingoConfig.RESPONSE_FIELDS that is present and
        not null or false is used, even if it turns out to be empty.

        Args:
            body: The raw response body; bytes are decoded as UTF-8, UTF-16 or UTF-32

        Returns:
            The translated text without trailing newlines, or None if the
            body holds no usable translation
        """
        try:
            data = json.loads(body)
        except ValueError:
            return None

        if not isinstance(data, dict):
            return None

        for field in LingoConfig.RESPONSE_FIELDS:
            value = data.get(field)
            if value is None or value is False:
                continue
            if not isinstance(value, str):
                return None
            return value.rstrip("\n") or None

        return None
