"""Configuration store adapters backed by git or an in-memory mapping."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Mapping
from pathlib import Path

from commitsign.app.ports import ConfigStorePort
from commitsign.errors import ConfigStoreError

logger = logging.getLogger(__name__)

# `git config --get` exits 1 when the key is not set.
_GIT_CONFIG_KEY_MISSING = 1


def normalize_key(key: str) -> str:
    """Canonicalise a dotted key the way git compares them.

    Section and variable names are case-insensitive; a subsection keeps its case.
    """
    parts = key.split(".")
    if len(parts) < 2 or not all(parts):
        raise ValueError(f"Invalid configuration key: {key!r}")
    section, *subsection, variable = parts
    return ".".join([section.lower(), *subsection, variable.lower()])


class GitConfigStore(ConfigStorePort):
    """Adapter that reads the effective value of a key via ``git config --get``.

    git merges the system, global and repository-local layers itself, so the
    value returned is the one git would use inside ``repo_path``.
    """

    def __init__(self, repo_path: Path, *, git_binary: str = "git") -> None:
        self.repo_path = Path(repo_path)
        self.git_binary = git_binary

    def get_string(self, key: str) -> str | None:
        cmdargs = [self.git_binary, "-C", str(self.repo_path), "config", "--get", key]
        logger.debug("Running %s", " ".join(cmdargs))
        try:
            completed = subprocess.run(cmdargs, capture_output=True, check=False)
        except OSError as exc:
            raise ConfigStoreError(
                f"Unable to run '{self.git_binary}' to read '{key}': {exc}"
            ) from exc

        if completed.returncode == _GIT_CONFIG_KEY_MISSING:
            logger.debug("git config %s is not set", key)
            return None
        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            raise ConfigStoreError(
                f"git config --get {key} failed with exit code {completed.returncode}: {stderr}"
            )

        try:
            value = completed.stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ConfigStoreError(f"git config value for '{key}' is not valid UTF-8") from exc
        return value.removesuffix("\n")


class MappingConfigStore(ConfigStorePort):
    """In-memory configuration store, useful for embedding and tests."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = {}
        for key, value in (values or {}).items():
            self._values[normalize_key(key)] = value

    def get_string(self, key: str) -> str | None:
        return self._values.get(normalize_key(key))
