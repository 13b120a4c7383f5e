"""Exceptions raised by the data structures in this package."""


class StructureError(Exception):
    """Base class for every error raised by a data structure."""


class EmptyError(StructureError, IndexError):
    """Raised when an element is requested from an empty structure."""


class CapacityError(StructureError, OverflowError):
    """Raised when a bounded structure has no room for another element."""


class InvalidPositionError(StructureError, IndexError):
    """Raised when a 1-based position does not name an element."""