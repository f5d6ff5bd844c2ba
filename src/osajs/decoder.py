"""Turn interpreter output into typed results or failures."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from .errors import ResultDecodeError, ScriptFailure, TransportError
from .executor import ExecutionOutcome


def decode_stderr(stderr: bytes) -> str:
    try:
        return stderr.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TransportError(f"stderr is not valid UTF-8: {exc}") from exc


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(item) for item in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def decode_json(data: bytes | str, result_type: Any = Any) -> Any:
    """Validate a JSON document against *result_type* without coercion.

    Strict mode rejects values that only fit after conversion, such as the
    string ``"42"`` or ``true`` for an ``int``.
    """

    try:
        return TypeAdapter(result_type).validate_json(data, strict=True)
    except ValidationError as exc:
        raise ResultDecodeError(_describe(exc)) from exc


def decode_outcome(outcome: ExecutionOutcome, result_type: Any = Any) -> Any:
    """Return the decoded result of *outcome* or raise the matching failure.

    A failed process raises :class:`ScriptFailure` carrying standard error
    verbatim. A successful process whose output does not validate against
    *result_type* raises :class:`ResultDecodeError` instead, since the fault
    lies with the expected shape rather than the script.
    """

    if not outcome.success:
        raise ScriptFailure(decode_stderr(outcome.stderr), returncode=outcome.returncode)
    return decode_json(outcome.stdout, result_type)
