"""Error taxonomies for signing-method resolution and signing execution.

Each taxonomy is a closed set of kinds. An exception carries its ``kind`` and
the human-readable ``detail`` taken from the underlying failure, so callers
can branch on ``exc.kind`` instead of subclass checks.
"""

from __future__ import annotations

from enum import StrEnum


class CommitSignError(Exception):
    """Base class for every failure raised by commitsign."""

    templates: dict[StrEnum, str] = {}

    def __init__(self, kind: StrEnum, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(self.templates[kind].format(detail=detail))


class SignBuilderErrorKind(StrEnum):
    INVALID_FORMAT = "invalid_format"
    GPG_SIGNING_KEY = "gpg_signing_key"
    SIGNATURE = "signature"
    METHOD_NOT_IMPLEMENTED = "method_not_implemented"


class SignBuilderError(CommitSignError):
    """Raised when no signer can be derived from the git configuration.

    Always recoverable by fixing configuration.
    """

    templates = {
        SignBuilderErrorKind.INVALID_FORMAT: (
            "Failed to derive a commit signing method from git configuration "
            "'gpg.format': {detail}"
        ),
        SignBuilderErrorKind.GPG_SIGNING_KEY: (
            "Failed to retrieve 'user.signingkey' from the git configuration: {detail}"
        ),
        SignBuilderErrorKind.SIGNATURE: "Failed to build signing signature: {detail}",
        SignBuilderErrorKind.METHOD_NOT_IMPLEMENTED: (
            "Select signing method '{detail}' has not been implemented"
        ),
    }

    @classmethod
    def invalid_format(cls, value: str) -> SignBuilderError:
        return cls(SignBuilderErrorKind.INVALID_FORMAT, value)

    @classmethod
    def gpg_signing_key(cls, detail: str) -> SignBuilderError:
        return cls(SignBuilderErrorKind.GPG_SIGNING_KEY, detail)

    @classmethod
    def signature(cls, detail: str) -> SignBuilderError:
        return cls(SignBuilderErrorKind.SIGNATURE, detail)

    @classmethod
    def method_not_implemented(cls, method: str) -> SignBuilderError:
        return cls(SignBuilderErrorKind.METHOD_NOT_IMPLEMENTED, method)


class SignErrorKind(StrEnum):
    SPAWN = "spawn"
    STDIN = "stdin"
    WRITE_BUFFER = "write_buffer"
    OUTPUT = "output"
    SHELLOUT = "shellout"


class SignError(CommitSignError):
    """Raised when the external signing program cannot produce a signature."""

    templates = {
        SignErrorKind.SPAWN: "Failed to spawn signing process: {detail}",
        SignErrorKind.STDIN: "Failed to acquire standard input handler",
        SignErrorKind.WRITE_BUFFER: (
            "Failed to write buffer to standard input of signing process: {detail}"
        ),
        SignErrorKind.OUTPUT: "Failed to get output of signing process call: {detail}",
        SignErrorKind.SHELLOUT: "Failed to execute signing process: {detail}",
    }

    @classmethod
    def spawn(cls, detail: str) -> SignError:
        return cls(SignErrorKind.SPAWN, detail)

    @classmethod
    def stdin(cls) -> SignError:
        return cls(SignErrorKind.STDIN)

    @classmethod
    def write_buffer(cls, detail: str) -> SignError:
        return cls(SignErrorKind.WRITE_BUFFER, detail)

    @classmethod
    def output(cls, detail: str) -> SignError:
        return cls(SignErrorKind.OUTPUT, detail)

    @classmethod
    def shellout(cls, detail: str) -> SignError:
        return cls(SignErrorKind.SHELLOUT, detail)


class ConfigStoreError(RuntimeError):
    """Raised when the configuration store itself cannot be queried."""

    pass


class IdentityError(RuntimeError):
    """Raised when no committer identity can be built."""

    pass
