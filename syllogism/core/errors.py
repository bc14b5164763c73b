"""
Error taxonomy.

Every failure is a ValueError subclass raised at the point of detection.
Each carries a `context` dict describing the offending input, so callers
can tell which argument to fix without parsing the message.
"""

from typing import Optional


class SyllogismError(ValueError):
    """Base class for all premise and conclusion errors."""

    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message)
        self.context = context or {}


class InvalidCategory(SyllogismError):
    """Category is neither major nor minor."""


class InvalidRole(SyllogismError):
    """The roles in a premise do not exactly match its category's role set."""


class InvalidType(SyllogismError):
    """The proposition type is not one of A, E, I, O."""


class InvalidTerm(SyllogismError):
    """A term is not text."""


class NoMatchingFigure(SyllogismError):
    """
    No figure accepts this pair of premises.

    Covers both an unknown (shape, type) combination and a known one whose
    middle terms disagree.
    """
