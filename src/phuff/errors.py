"""Typed errors for phuff.

Every error carries the exit code the CLI returns when it surfaces.
"""

from __future__ import annotations

EXIT_INVALID_INPUT = 2
EXIT_GENERIC = 10
EXIT_MISSING_CODE = 11
EXIT_INVALID_CODE_TABLE = 12
EXIT_PADDING_AMBIGUITY = 13
EXIT_CORRUPT_STREAM = 14


class HuffmanError(Exception):
    """Base error for phuff."""

    exit_code: int = EXIT_GENERIC


class InvalidInput(HuffmanError):
    """Nothing to build a tree from (empty message or frequency table)."""

    exit_code = EXIT_INVALID_INPUT


class MissingCode(HuffmanError):
    exit_code = EXIT_MISSING_CODE

    def __init__(self, character: str) -> None:
        super().__init__(f"No code for character {character!r}")
        self.character = character


class InvalidCodeTable(HuffmanError):
    """Empty table, malformed code, or one code being a prefix of another."""

    exit_code = EXIT_INVALID_CODE_TABLE


class PaddingAmbiguity(HuffmanError):
    """The real bit length disagrees with the packed bytes."""

    exit_code = EXIT_PADDING_AMBIGUITY


class CorruptStream(HuffmanError):
    exit_code = EXIT_CORRUPT_STREAM
