"""Errors raised by the verifier wrapper.

A non-zero exit from the verifier is not an error here: it is returned as
data by the Invoker. Only problems of the wrapper itself are exceptions.
"""

from __future__ import annotations

from pathlib import Path


class VerifierError(Exception):
    """Base class for asset-verify errors."""


class ConfigurationError(VerifierError):
    """The verifier executable is missing or misconfigured."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class InvalidArgumentError(VerifierError, ValueError):
    """No input paths were supplied, or the input is not a sequence."""
