"""osajs public package exports."""

from .config import OsaSettings, load_config, load_settings
from .decoder import decode_json, decode_outcome
from .errors import (
    ExecutionCancelled,
    ExecutionTimeout,
    FailureKind,
    OsaError,
    ParamsSerializationError,
    ResultDecodeError,
    ScriptFailure,
    TransportError,
)
from .executor import ExecutionOutcome, ProcessExecutor, ProgramRunner
from .pool import ScriptPool
from .script import JavaScript, ScriptResult
from .wrapper import PARAMS_VAR, wrap_code

__all__ = [
    "PARAMS_VAR",
    "ExecutionCancelled",
    "ExecutionOutcome",
    "ExecutionTimeout",
    "FailureKind",
    "JavaScript",
    "OsaError",
    "OsaSettings",
    "ParamsSerializationError",
    "ProcessExecutor",
    "ProgramRunner",
    "ResultDecodeError",
    "ScriptFailure",
    "ScriptPool",
    "ScriptResult",
    "TransportError",
    "decode_json",
    "decode_outcome",
    "load_config",
    "load_settings",
    "wrap_code",
]
