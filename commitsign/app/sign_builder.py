"""Derive a commit signer from layered git configuration.

Each field is resolved from an ordered chain of keys, most specific first,
falling back to git's own default:

    gitui.signing_methods   -> "shellouts"
    gpg.format              -> "openpgp"
    gpg.openpgp.program, gpg.program -> "gpg"
    user.signingKey         -> committer identity "name <email>"
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from commitsign.app.adapters.gpg import GPGSign
from commitsign.app.ports import ConfigStorePort, IdentityPort, ProcessRunnerPort
from commitsign.errors import IdentityError, SignBuilderError

logger = logging.getLogger(__name__)

SIGNING_METHODS_KEYS = ("gitui.signing_methods",)
FORMAT_KEYS = ("gpg.format",)
PROGRAM_KEYS = ("gpg.openpgp.program", "gpg.program")
SIGNING_KEY_KEYS = ("user.signingKey",)

DEFAULT_SIGNING_METHOD = "shellouts"
DEFAULT_FORMAT = "openpgp"
DEFAULT_PROGRAM = "gpg"

# Formats git documents for gpg.format that are not supported yet.
UNIMPLEMENTED_FORMATS = frozenset({"x509", "ssh"})
NATIVE_SIGNING_METHOD = "rust"


def first_configured(config: ConfigStorePort, keys: Sequence[str]) -> str | None:
    """Return the value of the first key in ``keys`` that is set."""
    for key in keys:
        value = config.get_string(key)
        if value is not None:
            logger.debug("resolved %s from configuration", key)
            return value
    return None


class SignBuilder:
    """Build a :class:`~commitsign.app.ports.SignerPort` from git configuration."""

    @staticmethod
    def from_gitconfig(
        config: ConfigStorePort,
        identity: IdentityPort,
        *,
        runner: ProcessRunnerPort | None = None,
    ) -> GPGSign:
        """Get a signer for commit data from the repository configuration.

        Args:
            config: Effective git configuration of the repository
            identity: Source of the ``name <email>`` fallback signing key
            runner: Process runner handed to the signer (defaults to real subprocesses)

        Returns:
            Signer holding the resolved program and signing key

        Raises:
            SignBuilderError: If the configured method or format is unsupported,
                or no signing key can be determined
        """
        signing_methods = first_configured(config, SIGNING_METHODS_KEYS)
        if signing_methods is None:
            signing_methods = DEFAULT_SIGNING_METHOD
        if signing_methods == NATIVE_SIGNING_METHOD:
            raise SignBuilderError.method_not_implemented("<rust native>")
        if signing_methods != DEFAULT_SIGNING_METHOD:
            raise SignBuilderError.invalid_format(signing_methods)

        # https://git-scm.com/docs/git-config#Documentation/git-config.txt-gpgformat
        signing_format = first_configured(config, FORMAT_KEYS)
        if signing_format is None:
            signing_format = DEFAULT_FORMAT
        if signing_format in UNIMPLEMENTED_FORMATS:
            raise SignBuilderError.method_not_implemented(signing_format)
        if signing_format != DEFAULT_FORMAT:
            raise SignBuilderError.invalid_format(signing_format)

        # a present but empty value still wins over the later keys
        program = first_configured(config, PROGRAM_KEYS)
        if program is None:
            program = DEFAULT_PROGRAM
        signing_key = _resolve_signing_key(config, identity)

        logger.debug("resolved signer: program=%s signing_key=%s", program, signing_key)
        if runner is None:
            return GPGSign(program=program, signing_key=signing_key)
        return GPGSign(program=program, signing_key=signing_key, runner=runner)


def _resolve_signing_key(config: ConfigStorePort, identity: IdentityPort) -> str:
    signing_key = first_configured(config, SIGNING_KEY_KEYS)
    if signing_key is not None:
        return signing_key

    try:
        fallback = identity.default_identity()
    except IdentityError as exc:
        cause = SignBuilderError.signature(str(exc))
        cause.__cause__ = exc
        raise SignBuilderError.gpg_signing_key(str(cause)) from cause

    if not fallback:
        raise SignBuilderError.gpg_signing_key("no committer identity available")
    logger.debug("user.signingKey not set, using committer identity")
    return fallback


def resolve(
    config: ConfigStorePort,
    identity: IdentityPort,
    *,
    runner: ProcessRunnerPort | None = None,
) -> GPGSign:
    """Module-level shortcut for :meth:`SignBuilder.from_gitconfig`."""
    return SignBuilder.from_gitconfig(config, identity, runner=runner)
