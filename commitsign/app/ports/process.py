"""Process runner port interface."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol


class SignState(StrEnum):
    """Lifecycle of a single signing call; nothing carries over between calls."""

    CREATED = "created"
    SPAWNED = "spawned"
    INPUT_WRITTEN = "input_written"
    EXITED = "exited"
    CONFIRMED = "confirmed"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Exit status and captured streams of a finished child process."""

    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def success(self) -> bool:
        return self.returncode == 0


class ProcessRunnerPort(Protocol):
    """Port interface for running one child process with piped streams.

    Implementations must write ``input_data`` to the child's stdin and close it
    before draining stdout and stderr.

    Raises:
        SignError: SPAWN, STDIN, WRITE_BUFFER or OUTPUT kinds
    """

    def run(self, argv: list[str], input_data: bytes) -> ProcessResult:
        ...
