"""Identity port interface for the fallback signing identity."""

from typing import Protocol


class IdentityPort(Protocol):
    """Port interface supplying the committer identity.

    Used when no explicit ``user.signingKey`` is configured.
    """

    def default_identity(self) -> str:
        """Return the identity formatted as ``name <email>``.

        Raises:
            IdentityError: If no committer name can be determined
        """
        ...
