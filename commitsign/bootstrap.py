"""Application bootstrap wiring ports, adapters, and services."""

from __future__ import annotations

from dataclasses import dataclass

from commitsign.app.adapters import ConfigIdentity, GitConfigStore, SubprocessRunner
from commitsign.app.ports import ConfigStorePort, IdentityPort, ProcessRunnerPort, SignerPort
from commitsign.app.sign_builder import SignBuilder
from commitsign.config import Settings, get_settings


@dataclass(slots=True)
class ApplicationContainer:
    """Aggregates wired adapters for the CLI layer."""

    settings: Settings
    config_store: ConfigStorePort
    identity: IdentityPort
    runner: ProcessRunnerPort

    def build_signer(self) -> SignerPort:
        """Resolve the signer from the repository configuration.

        Raises:
            SignBuilderError: If the configuration does not describe a usable signer
            ConfigStoreError: If git cannot be queried
        """
        return SignBuilder.from_gitconfig(self.config_store, self.identity, runner=self.runner)


def bootstrap_application(settings: Settings | None = None) -> ApplicationContainer:
    """Instantiate adapters for CLI consumption."""

    active_settings = settings or get_settings()

    config_store = GitConfigStore(
        active_settings.get_repo_path(),
        git_binary=active_settings.git_binary,
    )
    identity = ConfigIdentity(config_store)
    runner = SubprocessRunner(timeout=active_settings.sign_timeout_seconds)

    return ApplicationContainer(
        settings=active_settings,
        config_store=config_store,
        identity=identity,
        runner=runner,
    )
