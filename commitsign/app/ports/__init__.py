"""Port interfaces for the commitsign application layer.

These protocol interfaces define contracts for adapters.
Resolution and signing logic depend on these ports, never on concrete implementations.
"""

__all__ = [
    "ConfigStorePort",
    "IdentityPort",
    "ProcessResult",
    "ProcessRunnerPort",
    "SignerPort",
]

from commitsign.app.ports.config_store import ConfigStorePort
from commitsign.app.ports.identity import IdentityPort
from commitsign.app.ports.process import ProcessResult, ProcessRunnerPort
from commitsign.app.ports.signer import SignerPort
