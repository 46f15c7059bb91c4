"""Concrete adapters wiring application ports to built-in implementations."""

from __future__ import annotations

from .git_config import GitConfigStore, MappingConfigStore
from .gpg import GPGSign
from .identity import ConfigIdentity
from .process import ScriptedProcessRunner, SubprocessRunner

__all__ = [
    "ConfigIdentity",
    "GitConfigStore",
    "GPGSign",
    "MappingConfigStore",
    "ScriptedProcessRunner",
    "SubprocessRunner",
]
