"""Exceptions raised while building or compiling timelines."""


class AnimeCSSError(Exception):
    """Base exception for timeline building and CSS compilation errors."""
    pass


class ValidationError(AnimeCSSError, TypeError):
    """Input that needs a live DOM: element targets or function-based parameters."""
    pass


class ParseError(AnimeCSSError, ValueError):
    """A numeric literal (offset, duration) could not be parsed."""
    pass


class UnsupportedFeatureError(AnimeCSSError, NotImplementedError):
    """A feature with no static CSS equivalent, such as Penner easings."""
    pass


class InvariantViolation(AnimeCSSError):
    """An internal precondition did not hold (e.g. last of an empty sequence)."""
    pass


class DefinitionError(AnimeCSSError, ValueError):
    """A timeline definition document is malformed."""
    pass
