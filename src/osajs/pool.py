"""Run independent script executions in parallel."""

from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

from .executor import ProgramRunner
from .script import JavaScript


class ScriptPool:
    """Thread based pool; every submission spawns its own interpreter."""

    def __init__(self, max_workers: int, runner: ProgramRunner | None = None) -> None:
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="osajs")
        self._runner = runner

    def submit(
        self,
        script: JavaScript,
        params: object = None,
        result_type: Any = Any,
        *,
        timeout: float | None = None,
        cancel: threading.Event | None = None,
    ) -> Future:
        return self._executor.submit(
            script.execute_with_params,
            params,
            result_type,
            runner=self._runner,
            timeout=timeout,
            cancel=cancel,
        )

    def map(
        self,
        script: JavaScript,
        params_list: list[object],
        result_type: Any = Any,
        *,
        timeout: float | None = None,
        cancel: threading.Event | None = None,
    ) -> list[Any]:
        """Execute *script* once per parameter set and return results in order.

        *timeout* applies to each execution; setting *cancel* stops every
        execution still running.
        """

        futures = [
            self.submit(script, params, result_type, timeout=timeout, cancel=cancel) for params in params_list
        ]
        return [future.result() for future in futures]

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "ScriptPool":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.shutdown()
