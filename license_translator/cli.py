#!/usr/bin/env python3
# ABOUTME: Command-line interface for the license translator.
# ABOUTME: Parses the help/translate commands and reports results and errors.

import argparse
import sys
from typing import List, NoReturn, Optional

from rich.console import Console
from rich.markup import escape

from license_translator.config import LingoConfig
from license_translator.file_handler import FileHandler
from license_translator.language import LanguageHandler
from license_translator.providers import LingoProvider

PROG_NAME = "4license-translate"
HELP_COMMANDS = ("help", "--help", "-h")

# Diagnostics and progress go to stderr; stdout carries only help text or the translation
console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)
output = Console()


class CommandParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors on stderr with exit status 1."""

    def error(self, message: str) -> NoReturn:
        console.print(f"[bold red]Error:[/] {escape(message)}")
        console.print(f"Run '{PROG_NAME} help' for usage information.")
        sys.exit(1)


class TranslatorCLI:
    """Command-line interface for the license translator."""

    @staticmethod
    def get_help_text() -> str:
        """Build the static usage document.

        Returns:
            The help text, identical for every invocation
        """
        lines = [
            "4License Translation Script",
            "===========================",
            "",
            f"This script translates the {LingoConfig.SOURCE_FILE} file into various "
            "languages using lingo.dev API.",
            "",
            "USAGE:",
            f"    {PROG_NAME} help                      - Show this help message",
            f"    {PROG_NAME} translate [LANG_CODE]     - Translate to specified language "
            "(outputs to stdout)",
            f"    {PROG_NAME} translate [LANG_CODE] > [OUTPUT_FILE]  - Translate and save to file",
            "",
            "SUPPORTED LANGUAGES:",
        ]

        numbered = LanguageHandler.iter_numbered()
        for title, codes in LanguageHandler.LANGUAGE_GROUPS:
            heading = f"{title}:"
            lines.extend(["", heading, "-" * len(heading)])
            for _ in codes:
                number, code, name = next(numbered)
                lines.append(f"    {f'{number}.':<4}{code:<8}- {name}")

        lines.extend([
            "",
            "EXAMPLES:",
            f"    {PROG_NAME} help",
            f"    {PROG_NAME} translate hi > LICENSE.hi",
            f"    {PROG_NAME} translate fr > LICENSE.fr",
            f"    {PROG_NAME} translate zh-CN > LICENSE.zh-CN",
            "",
            "ENVIRONMENT VARIABLES:",
            f"    {LingoConfig.API_KEY_ENV}   - API key for lingo.dev (required for translation)",
            f"    {LingoConfig.API_URL_ENV}   - Override the translation endpoint (optional)",
            "",
            "NOTE:",
            f"    You need to set the {LingoConfig.API_KEY_ENV} environment variable to use "
            "the translation feature.",
            f"    Visit {LingoConfig.SIGNUP_URL} to obtain an API key.",
            "",
        ])
        return "\n".join(lines) + "\n"

    @classmethod
    def display_help(cls) -> None:
        """Print the usage document to stdout."""
        output.print(
            cls.get_help_text(), markup=False, highlight=False, emoji=False, soft_wrap=True, end=""
        )

    @classmethod
    def parse_arguments(cls, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments.

        No arguments, or any of the help tokens, select the help command.

        Args:
            argv: Arguments without the program name (defaults to sys.argv[1:])

        Returns:
            Parsed arguments with a ``command`` attribute
        """
        if argv is None:
            argv = sys.argv[1:]

        first_arg = argv[0] if argv else None
        if first_arg is None or first_arg in HELP_COMMANDS:
            return argparse.Namespace(command="help")

        if first_arg != "translate":
            console.print(f"[bold red]Error:[/] Unknown command '{escape(first_arg)}'")
            console.print(f"Run '{PROG_NAME} help' for usage information.")
            sys.exit(1)

        parser = CommandParser(prog=PROG_NAME, add_help=False)
        subparsers = parser.add_subparsers(dest="command")
        # Codes are taken literally, so "-h" or "--x" reach the supported-language check
        translate_parser = subparsers.add_parser("translate", add_help=False, prefix_chars="+")
        translate_parser.add_argument("language", nargs="?", help="Target language code")

        # Anything after the language code is ignored
        args, _extra = parser.parse_known_args(argv)
        return args

    @staticmethod
    def write_output(text: str) -> None:
        """Write text to stdout as UTF-8 regardless of the locale encoding."""
        sys.stdout.flush()
        buffer = getattr(sys.stdout, "buffer", None)
        if buffer is None:
            sys.stdout.write(text)
        else:
            buffer.write(text.encode("utf-8"))
            buffer.flush()

    @staticmethod
    def fail(*messages: str) -> NoReturn:
        """Print diagnostic lines to stderr and exit with status 1."""
        for message in messages:
            console.print(message)
        sys.exit(1)

    @classmethod
    def report_missing_api_key(cls) -> NoReturn:
        """Explain how to configure the API key, then exit."""
        env_var = LingoConfig.API_KEY_ENV
        lines = [
            f"[bold red]Error:[/] {env_var} environment variable is not set.",
            f"Please set it with: export {env_var}='your-api-key'",
            f"or add {env_var}=your-api-key to one of:",
        ]
        lines.extend(f"  - {escape(path)}" for path in LingoConfig.get_config_paths())
        lines.extend([
            f"Visit {LingoConfig.SIGNUP_URL} to obtain an API key.",
            "",
            "[bold]ALTERNATIVE USAGE:[/]",
            "If lingo.dev is not available, you can adapt this tool to use:",
        ])
        lines.extend(f"  - {escape(provider)}" for provider in LingoConfig.ALTERNATIVE_PROVIDERS)
        cls.fail(*lines)

    @classmethod
    def translate_license(cls, target_language: Optional[str]) -> None:
        """Translate the source license file and write the result to stdout.

        Every precondition is checked before any network traffic. A failure
        at any step prints a diagnostic to stderr and exits with status 1.

        Args:
            target_language: A code from LanguageHandler.LANGUAGES
        """
        if target_language is None:
            cls.fail(
                "[bold red]Error:[/] Language code required for translate command.",
                f"Usage: {PROG_NAME} translate {escape('[LANG_CODE]')}",
            )

        source_file = LingoConfig.SOURCE_FILE
        if not FileHandler.source_exists(source_file):
            cls.fail(f"[bold red]Error:[/] Source file '{escape(source_file)}' not found.")

        if not LanguageHandler.is_language_supported(target_language):
            cls.fail(
                f"[bold red]Error:[/] Language code '{escape(target_language)}' is not supported.",
                f"Run '{PROG_NAME} help' to see the list of supported languages.",
            )

        api_key = LingoConfig.get_api_key()
        if not api_key:
            cls.report_missing_api_key()

        language_name = LanguageHandler.get_language_name(target_language)
        console.print(f"# Translating LICENSE to {escape(language_name)} ({escape(target_language)})...")
        console.print(f"# Source: {escape(source_file)}")
        console.print("# This may take a few moments...")
        console.print()

        content = FileHandler.read_file(source_file)

        provider = LingoProvider(api_key, api_url=LingoConfig.get_api_url())
        translated_text, response_body, error_msg = provider.translate_text(content, target_language)

        if error_msg:
            cls.fail(
                "[bold red]Error:[/] Failed to connect to translation service.",
                f"Details: {escape(error_msg)}",
                "",
                "NOTE: This tool requires a valid lingo.dev API key and internet connection.",
                "Verify that:",
                f"  1. Your {LingoConfig.API_KEY_ENV} is correct",
                "  2. You have internet connectivity",
                "  3. The lingo.dev service is accessible",
            )

        if not translated_text:
            cls.fail(
                "[bold red]Error:[/] Failed to parse translation response.",
                f"API Response: {escape(response_body or '')}",
                "",
                "This could mean:",
                "  1. The API returned an error",
                "  2. The response format is different than expected",
                f"  3. The language code '{escape(target_language)}' is not supported by lingo.dev",
            )

        cls.write_output(f"{translated_text}\n")

    @classmethod
    def run(cls, argv: Optional[List[str]] = None) -> None:
        """Run the translator command-line interface."""
        args = cls.parse_arguments(argv)

        if args.command == "help":
            cls.display_help()
            return

        cls.translate_license(args.language)
