"""Domain-specific errors for gointerfacefunc."""

from __future__ import annotations


class GoInterfaceFuncError(Exception):
    """Base error for gointerfacefunc."""


class NotFoundError(GoInterfaceFuncError):
    """Raised when the requested identifier does not resolve in any scanned file."""


class NotATypeError(GoInterfaceFuncError):
    """Raised when the identifier resolves to a non-type declaration."""


class NotAnInterfaceError(GoInterfaceFuncError):
    """Raised when the identifier is a type whose underlying type is not an interface."""


class UnsupportedShapeError(GoInterfaceFuncError):
    """Raised when an interface is not a single, singly-named, non-generic method."""


class ScanError(GoInterfaceFuncError):
    """Raised when Go source cannot be scanned into a program tree."""


class SnapshotDecodeError(GoInterfaceFuncError):
    """Raised when a program snapshot cannot be decoded from MessagePack."""
