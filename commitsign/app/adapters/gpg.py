"""OpenPGP signer that shells out to a gpg-compatible program."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from commitsign.app.adapters.process import SubprocessRunner
from commitsign.app.ports import ProcessRunnerPort, SignerPort
from commitsign.app.ports.process import SignState
from commitsign.errors import SignError

logger = logging.getLogger(__name__)

# Status line gpg writes to --status-fd once a signature has actually been made.
SIG_CREATED_MARKER = "\n[GNUPG:] SIG_CREATED "

# --status-fd=2: status lines on stderr; -bsau: detach-sign, sign, armor, local-user.
GPG_SIGN_ARGS = ("--status-fd=2", "-bsau")

_UNREADABLE_STDERR = "[error could not be read from stderr]"


@dataclass(frozen=True, slots=True)
class GPGSign(SignerPort):
    """Sign commit data using OpenPGP.

    Instances are immutable and hold no per-call state, so one value can be
    shared across call sites and threads. Each :meth:`sign` call spawns its own
    process through ``runner``.

    The exit status and the ``SIG_CREATED`` status line are checked
    independently; a program that exits 0 without confirming a signature is
    treated as a failure.
    """

    program: str
    signing_key: str
    runner: ProcessRunnerPort = field(
        default_factory=SubprocessRunner, compare=False, repr=False
    )

    def command(self) -> list[str]:
        """Return the argv used to invoke the signing program."""
        return [self.program, *GPG_SIGN_ARGS, self.signing_key]

    def sign(self, commit: str) -> str:
        """Sign commit with the configured program and key.

        ``commit`` is the serialized commit buffer decoded as UTF-8. The
        returned armored signature is what gets stored in the commit's
        ``gpgsig`` header; advancing the branch to the signed commit is the
        caller's job.
        """
        argv = self.command()
        logger.debug("sign state: %s", SignState.CREATED)
        logger.debug("signing command: %s", argv)

        try:
            payload = commit.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise SignError.write_buffer(str(exc)) from exc

        try:
            result = self.runner.run(argv, payload)
        except SignError:
            logger.debug("sign state: %s", SignState.FAILED)
            raise

        try:
            signed = self._validate(result.returncode, result.stdout, result.stderr)
        except SignError:
            logger.debug("sign state: %s", SignState.FAILED)
            raise

        logger.debug("sign state: %s", SignState.CONFIRMED)
        return signed

    def _validate(self, returncode: int, stdout: bytes, stderr: bytes) -> str:
        if returncode != 0:
            try:
                message = stderr.decode("utf-8")
            except UnicodeDecodeError:
                message = _UNREADABLE_STDERR
            raise SignError.shellout(
                f"failed to sign data, program '{self.program}' exited non-zero: {message}"
            )

        try:
            status = stderr.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SignError.shellout(str(exc)) from exc

        if SIG_CREATED_MARKER not in status:
            raise SignError.shellout(
                f"failed to sign data, program '{self.program}' failed, "
                "SIG_CREATED not seen in stderr"
            )

        try:
            return stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SignError.shellout(str(exc)) from exc
