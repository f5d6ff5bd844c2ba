"""Failure taxonomy for script execution."""

from __future__ import annotations

import enum


class FailureKind(enum.Enum):
    TRANSPORT = "transport"
    SERIALIZATION = "serialization"
    DESERIALIZATION = "deserialization"
    SCRIPT = "script"
    CANCELLED = "cancelled"


class OsaError(RuntimeError):
    """Base class for every failure raised while executing a script.

    Subclasses are mutually exclusive; ``kind`` lets callers branch on the
    failure without ``isinstance`` chains.
    """

    kind: FailureKind
    prefix: str = "script error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class TransportError(OsaError):
    """The interpreter could not be spawned or its output could not be read."""

    kind = FailureKind.TRANSPORT
    prefix = "script io error"


class ParamsSerializationError(OsaError):
    """Parameters could not be serialized; no process was started."""

    kind = FailureKind.SERIALIZATION
    prefix = "script json error"


class ResultDecodeError(OsaError):
    """Standard output was not JSON or did not match the requested type."""

    kind = FailureKind.DESERIALIZATION
    prefix = "script json error"


class ScriptFailure(OsaError):
    """The interpreter exited non-zero. ``message`` is its standard error."""

    kind = FailureKind.SCRIPT

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class ExecutionCancelled(OsaError):
    kind = FailureKind.CANCELLED
    prefix = "script cancelled"


class ExecutionTimeout(ExecutionCancelled):
    def __init__(self, timeout: float) -> None:
        super().__init__(f"interpreter did not exit within {timeout:g}s")
        self.timeout = timeout


def transport_error(exc: OSError) -> TransportError:
    """Map an ``OSError`` from process spawning, keeping its text."""

    detail = exc.strerror or str(exc)
    if exc.filename:
        detail = f"{detail}: {exc.filename!r}"
    return TransportError(detail)
