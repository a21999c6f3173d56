"""
Custom exceptions for the starry_sky package.
"""

from typing import Optional


class StarrySkyError(Exception):
    """Base exception for starry_sky errors."""
    pass


class ConfigurationError(StarrySkyError):
    """Raised when there's an issue with configuration settings."""
    pass


class MalformedCatalogError(StarrySkyError):
    """
    Raised when a binary star catalog cannot be decoded.

    Attributes:
        part (str): Which part of the file is broken: "header", "record" or "count".
        index (int | None): 0-based index of the first incomplete record, for "record".
    """

    def __init__(self, part: str, index: Optional[int] = None):
        self.part = part
        self.index = index
        if index is None:
            msg = f"malformed catalog: bad {part}"
        else:
            msg = f"malformed catalog: bad {part} at index {index}"
        super().__init__(msg)


class StarLookupError(StarrySkyError, LookupError):
    """Raised when a catalog number has no star in the field."""
    pass
