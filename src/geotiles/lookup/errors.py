"""Tile code validation errors."""

from __future__ import annotations


class InvalidCodeError(ValueError):
    """Base class for malformed tile codes."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


class InvalidFacetLetterError(InvalidCodeError):
    """First character of a tile code is missing or outside A-T."""

    def __init__(self, code: str) -> None:
        super().__init__(
            code,
            f"Invalid tile code {code!r}: first character must be a facet letter A-T",
        )


class InvalidDigitError(InvalidCodeError):
    """A subdivision character is not a digit 1-9."""

    def __init__(self, code: str, position: int) -> None:
        super().__init__(
            code,
            f"Invalid tile code {code!r}: character {position} must be a digit 1-9",
        )
        self.position = position
