"""Application layer: signer resolution over ports."""

from commitsign.app.sign_builder import SignBuilder, resolve

__all__ = ["SignBuilder", "resolve"]
