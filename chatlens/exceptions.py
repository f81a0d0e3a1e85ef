"""
Error taxonomy for ChatLens

Three user-facing parse errors (bad input) and one internal stage failure
(a broken analyzer contract).
"""

from typing import Optional


class ChatLensError(Exception):
    """Base class for all ChatLens errors."""


class ParseError(ChatLensError, ValueError):
    """Raw export text could not be turned into messages."""


class EmptyInputError(ParseError):
    """Raw text is empty or whitespace-only."""

    def __init__(self, message: str = "Chat export is empty"):
        super().__init__(message)


class UnrecognizedFormatError(ParseError):
    """No line matches the WhatsApp timestamp-bracket header."""

    def __init__(self, message: str = "No line matches the expected WhatsApp export format"):
        super().__init__(message)


class NoMessagesParsedError(ParseError):
    """Parsing finished but produced zero messages."""

    def __init__(self, message: str = "No valid messages found - check export format"):
        super().__init__(message)


class StageFailure(ChatLensError, RuntimeError):
    """An analyzer stage raised; always an internal error."""

    def __init__(self, stage: str, cause: Optional[BaseException] = None):
        self.stage = stage
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Analysis stage '{stage}' failed{detail}")
