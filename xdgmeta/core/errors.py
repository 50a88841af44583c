"""Exception types raised when config files or desktop entries are malformed."""

from __future__ import annotations


class XdgError(Exception):
    """Base class for malformed XDG metadata."""


class FormatError(XdgError):
    """A config file is structurally invalid (bad key syntax)."""

    def __init__(self, key: str) -> None:
        super().__init__(f"invalid key: {key}")
        self.key = key


class ValidationError(XdgError):
    """A desktop entry violates the desktop entry rules."""

    def __init__(self, message: str, key: str = "", value: str = "") -> None:
        super().__init__(message)
        self.key = key
        self.value = value

    @classmethod
    def missing_key(cls, key: str) -> "ValidationError":
        return cls(f"missing required key: {key}", key=key)
