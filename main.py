#!/usr/bin/env python3
# ABOUTME: Command-line entry point for translating the LICENSE.en-US file.
# ABOUTME: Uses the lingo.dev API and writes the translation to stdout.

from license_translator.cli import TranslatorCLI


def main() -> None:
    """Main entry point for the license translator CLI."""
    TranslatorCLI.run()


if __name__ == "__main__":
    main()
