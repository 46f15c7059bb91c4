"""Signer port interface for commit signing."""

from typing import Protocol


class SignerPort(Protocol):
    """Port interface for signing serialized commit data.

    Adapters: GPGSign (shells out to an OpenPGP program).

    Side effects: spawns one transient child process per call.
    """

    program: str
    signing_key: str

    def sign(self, commit: str) -> str:
        """Sign commit data.

        Args:
            commit: Serialized commit buffer, decoded as UTF-8

        Returns:
            Armored detached signature

        Raises:
            SignError: If the signing program fails or does not confirm the signature
        """
        ...
