"""Committer identity adapter."""

from __future__ import annotations

import os
from collections.abc import Mapping

from commitsign.app.ports import ConfigStorePort, IdentityPort
from commitsign.errors import IdentityError

_FORBIDDEN_CHARS = ("<", ">", "\n")


class ConfigIdentity(IdentityPort):
    """Build ``name <email>`` from git's committer environment and configuration.

    Lookup order mirrors git: ``GIT_COMMITTER_NAME`` then ``user.name`` for the
    name; ``GIT_COMMITTER_EMAIL``, ``user.email``, then ``EMAIL`` for the
    address. The name is required; a missing email renders as ``name <>``.
    """

    def __init__(
        self,
        config: ConfigStorePort,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._config = config
        self._environ = os.environ if environ is None else environ

    def default_identity(self) -> str:
        name = (
            self._environ.get("GIT_COMMITTER_NAME")
            or self._config.get_string("user.name")
            or ""
        ).strip()
        if not name:
            raise IdentityError("config value 'user.name' was not found")

        email = (
            self._environ.get("GIT_COMMITTER_EMAIL")
            or self._config.get_string("user.email")
            or self._environ.get("EMAIL")
            or ""
        ).strip()

        for label, value in (("name", name), ("email", email)):
            if any(char in value for char in _FORBIDDEN_CHARS):
                raise IdentityError(
                    f"failed to parse signature - {label} contains angle brackets or newline"
                )

        return f"{name} <{email}>"
