"""Errors raised by the turtle core."""

from __future__ import annotations

__all__ = ["InvalidArgument"]


class InvalidArgument(ValueError):
    """Raised synchronously when an operation rejects its input.

    The failing operation leaves the turtle state and its log untouched.
    """
