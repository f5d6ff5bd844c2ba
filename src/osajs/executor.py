"""Run wrapped programs through the OSA interpreter."""

from __future__ import annotations

import logging
import subprocess
import threading
import time
from dataclasses import dataclass
from typing import Protocol, Sequence

from .config import OsaSettings, load_settings
from .errors import ExecutionCancelled, ExecutionTimeout, transport_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExecutionOutcome:
    success: bool
    stdout: bytes
    stderr: bytes
    returncode: int


class ProgramRunner(Protocol):
    """Anything that can run program text and report the raw outcome."""

    def run(
        self,
        program: str,
        *,
        timeout: float | None = None,
        cancel: threading.Event | None = None,
    ) -> ExecutionOutcome:
        """Run *program* to completion."""


class ProcessExecutor(ProgramRunner):
    """Spawn one interpreter process per program and wait for it to exit.

    By default the call blocks until the child exits. Passing ``timeout`` or
    ``cancel`` bounds the wait; the child is killed when either fires.
    """

    def __init__(self, command: Sequence[str] | None = None, *, settings: OsaSettings | None = None) -> None:
        self._settings = settings or load_settings()
        if command is None:
            command = [self._settings.osascript, "-l", self._settings.language, "-e"]
        self._command = list(command)

    @property
    def command(self) -> list[str]:
        return list(self._command)

    def run(
        self,
        program: str,
        *,
        timeout: float | None = None,
        cancel: threading.Event | None = None,
    ) -> ExecutionOutcome:
        if timeout is None:
            timeout = self._settings.timeout
        argv = [*self._command, program]
        logger.debug("spawning %s with %d bytes of program text", argv[0], len(program))
        try:
            proc = subprocess.Popen(argv, stdin=subprocess.DEVNULL, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
        except OSError as exc:
            raise transport_error(exc) from exc

        with proc:
            stdout, stderr = self._wait(proc, timeout, cancel)
        logger.debug("%s exited with status %d", argv[0], proc.returncode)
        return ExecutionOutcome(
            success=proc.returncode == 0,
            stdout=stdout,
            stderr=stderr,
            returncode=proc.returncode,
        )

    def _wait(
        self,
        proc: subprocess.Popen,
        timeout: float | None,
        cancel: threading.Event | None,
    ) -> tuple[bytes, bytes]:
        if cancel is None:
            try:
                return proc.communicate(timeout=timeout)
            except subprocess.TimeoutExpired:
                self._kill(proc, "timeout")
                raise ExecutionTimeout(timeout) from None

        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            wait = self._settings.poll_interval
            if deadline is not None:
                wait = max(0.0, min(wait, deadline - time.monotonic()))
            try:
                return proc.communicate(timeout=wait)
            except subprocess.TimeoutExpired:
                pass
            if cancel.is_set():
                self._kill(proc, "cancellation")
                raise ExecutionCancelled("execution cancelled by caller")
            if deadline is not None and time.monotonic() >= deadline:
                self._kill(proc, "timeout")
                raise ExecutionTimeout(timeout)

    @staticmethod
    def _kill(proc: subprocess.Popen, reason: str) -> None:
        logger.warning("killing interpreter pid=%s after %s", proc.pid, reason)
        proc.kill()
        proc.communicate()
