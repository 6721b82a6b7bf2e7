"""
Mapping resolution exceptions.

Errors raised by the resolver and by URI parsing.
"""

from typing import Optional


class InvalidURIError(ValueError):
    """Exception raised when a string is not a syntactically valid URI."""

    def __init__(self, value: str, reason: str):
        super().__init__(f"Invalid URI {value!r}: {reason}")
        self.value = value
        self.reason = reason


class ResolutionError(Exception):
    """Base exception for failed lookups."""

    def __init__(self, key: str, message: Optional[str] = None):
        super().__init__(message or f"Could not resolve {key!r}")
        self.key = key


class MappingNotFoundError(ResolutionError):
    """Exception raised when no exact entry or pattern rule matches the key."""

    def __init__(self, key: str):
        super().__init__(key, f"No mapping found for {key!r}")


class InvalidTargetError(ResolutionError):
    """Exception raised when a pattern matched but did not produce a valid URI."""

    def __init__(self, key: str, target: str):
        super().__init__(key, f"Pattern for {key!r} produced invalid URI {target!r}")
        self.target = target
