"""Exceptions raised by the linked list and graph structures.

All errors are raised synchronously at the point of failure and are never
retried internally. Each one also derives from the closest built-in
exception so callers can catch ``LookupError``/``IndexError``/``KeyError``.
"""


class StructureError(Exception):
    """Base class for data structure errors."""

    def __init__(self, message: str):
        """Initialize the exception with a descriptive message.

        Args:
            message: Description of the failure
        """
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class EmptyCollectionError(StructureError, LookupError):
    """Raised when removing an element from an empty collection."""


class OutOfRangeError(StructureError, IndexError):
    """Raised when a position or count falls outside the collection."""


class UnknownNodeError(StructureError, KeyError):
    """Raised when a graph operation references a label that was never added."""

    def __init__(self, label: str):
        super().__init__(f"Unknown node label: {label!r}")
        self.label = label


__all__ = ["EmptyCollectionError", "OutOfRangeError", "StructureError", "UnknownNodeError"]
