"""Process runner adapters: real subprocesses and a scripted test double."""

from __future__ import annotations

import contextlib
import logging
import subprocess
import threading
import time
from dataclasses import dataclass, field

from commitsign.app.ports import ProcessResult, ProcessRunnerPort
from commitsign.app.ports.process import SignState
from commitsign.errors import SignError

logger = logging.getLogger(__name__)


class SubprocessRunner(ProcessRunnerPort):
    """Run the signing program as a child process with all three streams piped.

    Input is written and stdin closed before the output pipes are drained;
    the program has no end-of-message marker other than EOF on stdin.
    ``timeout`` is None by default, which waits for the child indefinitely.
    When set, it bounds the whole call: a watchdog kills a child that stops
    reading its input, and the drain gets whatever time remains.
    """

    def __init__(self, *, timeout: float | None = None) -> None:
        self.timeout = timeout

    def run(self, argv: list[str], input_data: bytes) -> ProcessResult:
        try:
            proc = subprocess.Popen(
                argv,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except (OSError, ValueError) as exc:
            raise SignError.spawn(str(exc)) from exc
        logger.debug("sign state: %s (pid %s)", SignState.SPAWNED, proc.pid)

        if proc.stdin is None:
            _reap(proc)
            raise SignError.stdin()

        expired = threading.Event()
        watchdog = self._start_watchdog(proc, expired)
        deadline = None if self.timeout is None else time.monotonic() + self.timeout

        try:
            try:
                proc.stdin.write(input_data)
                proc.stdin.close()
            except OSError as exc:
                _reap(proc)
                if expired.is_set():
                    raise SignError.output(f"timed out after {self.timeout}s") from exc
                raise SignError.write_buffer(str(exc)) from exc
        finally:
            if watchdog is not None:
                watchdog.cancel()
        # communicate() must not touch the stdin handle closed above.
        proc.stdin = None
        logger.debug("sign state: %s (%d bytes)", SignState.INPUT_WRITTEN, len(input_data))

        remaining = None if deadline is None else max(deadline - time.monotonic(), 0.0)
        try:
            stdout, stderr = proc.communicate(timeout=remaining)
        except subprocess.TimeoutExpired as exc:
            _reap(proc)
            raise SignError.output(f"timed out after {self.timeout}s") from exc
        except (OSError, ValueError) as exc:
            _reap(proc)
            raise SignError.output(str(exc)) from exc

        if expired.is_set():
            raise SignError.output(f"timed out after {self.timeout}s")

        logger.debug("sign state: %s (exit code %s)", SignState.EXITED, proc.returncode)
        return ProcessResult(returncode=proc.returncode, stdout=stdout, stderr=stderr)

    def _start_watchdog(
        self, proc: subprocess.Popen[bytes], expired: threading.Event
    ) -> threading.Timer | None:
        if self.timeout is None:
            return None

        def _expire() -> None:
            expired.set()
            proc.kill()

        watchdog = threading.Timer(self.timeout, _expire)
        watchdog.daemon = True
        watchdog.start()
        return watchdog


def _reap(proc: subprocess.Popen[bytes]) -> None:
    """Kill ``proc`` and release its pipes."""
    if proc.stdin is not None:
        # the child may already be gone; a broken pipe on close is expected
        with contextlib.suppress(OSError):
            proc.stdin.close()
        proc.stdin = None
    proc.kill()
    proc.communicate()


@dataclass(slots=True)
class ScriptedProcessRunner(ProcessRunnerPort):
    """Test double that returns a scripted result instead of spawning a process.

    Every call is recorded in ``calls`` as ``(argv, input_data)``. When
    ``error`` is set it is raised in place of returning a result.
    """

    returncode: int = 0
    stdout: bytes = b""
    stderr: bytes = b""
    error: SignError | None = None
    calls: list[tuple[list[str], bytes]] = field(default_factory=list)

    @classmethod
    def confirmed(cls, signature: str, *, key_id: str = "0123456789ABCDEF") -> ScriptedProcessRunner:
        """Script a well-behaved OpenPGP program that emits ``SIG_CREATED``."""
        stderr = (
            f"[GNUPG:] KEY_CONSIDERED {key_id} 2\n"
            f"[GNUPG:] BEGIN_SIGNING H10\n"
            f"[GNUPG:] SIG_CREATED D 1 10 00 1700000000 {key_id}\n"
        )
        return cls(stdout=signature.encode("utf-8"), stderr=stderr.encode("utf-8"))

    def run(self, argv: list[str], input_data: bytes) -> ProcessResult:
        self.calls.append((list(argv), input_data))
        if self.error is not None:
            raise self.error
        return ProcessResult(returncode=self.returncode, stdout=self.stdout, stderr=self.stderr)
