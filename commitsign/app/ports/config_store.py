"""Configuration store port interface."""

from typing import Protocol


class ConfigStorePort(Protocol):
    """Port interface for read-only git configuration lookups.

    Keys are dotted names (``section.variable`` or
    ``section.subsection.variable``). Layering (system, global, local) is the
    adapter's concern; callers only see the effective value.

    Side effects: None from the caller's perspective (read-only).
    """

    def get_string(self, key: str) -> str | None:
        """Return the effective value of ``key``, or None when it is unset."""
        ...
