"""JavaScript for Automation scripts with typed parameters and results.

Parameters are visible to the script body as ``$params``; whatever the body
``return``s is serialized to JSON and decoded into the requested type::

    script = JavaScript("return $params.a + $params.b;")
    script.execute_with_params({"a": 40, "b": 2}, int)  # -> 42
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from .decoder import decode_outcome
from .errors import OsaError
from .executor import ProcessExecutor, ProgramRunner
from .wrapper import wrap_code


@lru_cache(maxsize=1)
def default_runner() -> ProcessExecutor:
    """Return the shared executor built from the environment settings.

    Settings are read once per process; call ``default_runner.cache_clear()``
    after changing ``OSAJS_*`` variables.
    """

    return ProcessExecutor()


@dataclass(slots=True)
class ScriptResult:
    """Either a decoded value or the failure that prevented one."""

    ok: bool
    value: Any = None
    error: OsaError | None = None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.value


@dataclass(frozen=True, slots=True)
class JavaScript:
    """Holds the code body of an Apple flavoured JavaScript."""

    code: str

    def execute(
        self,
        result_type: Any = Any,
        *,
        runner: ProgramRunner | None = None,
        timeout: float | None = None,
        cancel: threading.Event | None = None,
    ) -> Any:
        """Execute the script without parameters (``$params`` is ``{}``)."""

        return self.execute_with_params(None, result_type, runner=runner, timeout=timeout, cancel=cancel)

    def execute_with_params(
        self,
        params: object,
        result_type: Any = Any,
        *,
        runner: ProgramRunner | None = None,
        timeout: float | None = None,
        cancel: threading.Event | None = None,
    ) -> Any:
        """Execute the script with *params* bound to ``$params``.

        Raises a subclass of :class:`~osajs.errors.OsaError` on failure.
        Parameters are serialized before anything is spawned.
        """

        program = wrap_code(self.code, params)
        runner = runner or default_runner()
        outcome = runner.run(program, timeout=timeout, cancel=cancel)
        return decode_outcome(outcome, result_type)

    def attempt(
        self,
        params: object = None,
        result_type: Any = Any,
        *,
        runner: ProgramRunner | None = None,
        timeout: float | None = None,
        cancel: threading.Event | None = None,
    ) -> ScriptResult:
        """Like :meth:`execute_with_params` but return failures as a value."""

        try:
            value = self.execute_with_params(
                params, result_type, runner=runner, timeout=timeout, cancel=cancel
            )
        except OsaError as exc:
            return ScriptResult(ok=False, error=exc)
        return ScriptResult(ok=True, value=value)
