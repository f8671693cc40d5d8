"""Invocation of the external asset verifier.

The Invoker is the whole engineering content of this project: it locates
the verifier script under the project root, makes sure it can be executed,
runs it with the caller's arguments and relays what it printed. Validation
rules live in the script itself; a non-zero exit code is the script's way of
reporting rejected assets and is returned, never raised.
"""

from __future__ import annotations

import io
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import IO, Any

from pydantic import ValidationError

from adapters.permissions import make_executable
from adapters.process_runner import AsyncioProcessRunner
from core.config import VerifierSettings
from core.domain.models import InvocationRequest, InvocationResult
from core.errors import ConfigurationError, InvalidArgumentError
from core.interfaces.process_runner import ProcessRunner

logger = logging.getLogger(__name__)

USAGE_HINT = "Pass at least one file. Example: asset-verify assets_pub/*"


def build_request(inputs: Any) -> InvocationRequest:
    """Normalize caller input into an `InvocationRequest`.

    Accepts any non-string sequence of `str` or `os.PathLike` items.
    """

    if isinstance(inputs, (str, bytes)) or not isinstance(inputs, Sequence):
        raise InvalidArgumentError(USAGE_HINT)
    if len(inputs) == 0:
        raise InvalidArgumentError(USAGE_HINT)

    args: list[str] = []
    for item in inputs:
        if isinstance(item, os.PathLike):
            item = os.fspath(item)
        if not isinstance(item, str):
            raise InvalidArgumentError(f"Arguments must be paths, got {type(item).__name__}")
        args.append(item)

    try:
        return InvocationRequest(args=args)
    except ValidationError as exc:
        raise InvalidArgumentError(USAGE_HINT) from exc


def _relay(data: bytes, stream: IO[Any]) -> None:
    if not data:
        return
    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        stream.flush()
        buffer.write(data)
        buffer.flush()
    elif isinstance(stream, io.TextIOBase):
        stream.write(data.decode("utf-8", errors="replace"))
        stream.flush()
    else:
        stream.write(data)
        stream.flush()


class Invoker:
    """Locates, prepares and runs the verifier.

    `stdout`/`stderr` default to the interpreter's streams at call time, so
    redirections done after construction are honoured.
    """

    def __init__(
        self,
        settings: VerifierSettings | None = None,
        *,
        runner: ProcessRunner | None = None,
        stdout: IO[Any] | None = None,
        stderr: IO[Any] | None = None,
    ) -> None:
        self.settings = settings or VerifierSettings()
        self.runner = runner or AsyncioProcessRunner()
        self._stdout = stdout
        self._stderr = stderr

    @property
    def project_root(self) -> Path:
        return self.settings.resolved_root()

    @property
    def verifier(self) -> Path:
        return self.settings.resolved_verifier()

    def ensure_verifier(self) -> Path:
        """Return the verifier path, raising `ConfigurationError` if absent.

        The chmod that follows is an attempt whose failure is discarded: the
        script may already be executable, and if it is not the launch itself
        will report it.
        """

        verifier = self.verifier
        if not verifier.exists():
            raise ConfigurationError(
                f"Verifier not found at {verifier}. "
                "Move your verify_assets.sh into tools/ then chmod +x.",
                path=verifier,
            )
        if not make_executable(verifier):
            logger.debug("Could not mark %s executable; continuing", verifier)
        return verifier

    async def run(self, inputs: Sequence[str]) -> InvocationResult:
        """Run the verifier and return the structured result without relaying it."""

        request = build_request(inputs)
        verifier = self.ensure_verifier()
        return await self.runner.run([os.fspath(verifier), *request.args], cwd=self.project_root)

    async def verify(self, inputs: Sequence[str]) -> int:
        """Run the verifier on `inputs`, relay its output and return its exit code."""

        result = await self.run(inputs)
        _relay(result.stdout, self._stdout or sys.stdout)
        _relay(result.stderr, self._stderr or sys.stderr)
        return result.exit_code


async def verify(inputs: Sequence[str], settings: VerifierSettings | None = None) -> int:
    """Programmatic entry point: `await verify(["assets_pub/intro.mp4"])`."""

    return await Invoker(settings).verify(inputs)
