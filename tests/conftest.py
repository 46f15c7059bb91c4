"""Pytest configuration and fixtures."""

import gc
import shutil
import subprocess
import sys
import tempfile
import time
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from commitsign.config import Settings

FAKE_GPG_SOURCE = Path(__file__).resolve().parent / "fixtures" / "fake_gpg.py"

_COMMITTER_ENV = ("GIT_COMMITTER_NAME", "GIT_COMMITTER_EMAIL", "EMAIL")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    try:
        yield Path(tmpdir)
    finally:
        # Force garbage collection to release any file handles
        gc.collect()
        # Small delay to allow OS to release file locks
        time.sleep(0.1)
        shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def clean_committer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop committer overrides inherited from the developer's shell."""

    for name in _COMMITTER_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_gpg(temp_dir: Path) -> Path:
    """Install an executable stand-in for gpg (behaviour chosen via FAKE_GPG_MODE)."""

    if sys.platform == "win32":
        pytest.skip("fake gpg relies on a POSIX shebang")

    program = temp_dir / "fake-gpg"
    program.write_text(
        f"#!{sys.executable}\n" + FAKE_GPG_SOURCE.read_text(encoding="utf-8"),
        encoding="utf-8",
    )
    program.chmod(0o755)
    return program


def git(repo: Path, *args: str) -> None:
    """Run a git command inside ``repo``, failing the test on error."""

    subprocess.run(["git", "-C", str(repo), *args], check=True, capture_output=True)


@pytest.fixture
def git_config(git_repo: Path) -> Callable[[str, str], None]:
    """Return a setter for repository-local configuration values."""

    def _set(key: str, value: str) -> None:
        git(git_repo, "config", key, value)

    return _set


@pytest.fixture
def git_repo(
    temp_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
    clean_committer_env: None,
) -> Path:
    """Initialise an isolated repository with ``user.name``/``user.email`` set.

    Global and system configuration are disabled so the developer's own git
    setup cannot leak into assertions.
    """

    if shutil.which("git") is None:
        pytest.skip("git executable not available")

    home = temp_dir / "home"
    home.mkdir()
    global_config = home / ".gitconfig"
    global_config.write_text("", encoding="utf-8")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")

    repo = temp_dir / "repo"
    repo.mkdir()
    git(repo, "init", "--quiet")
    git(repo, "config", "user.name", "name")
    git(repo, "config", "user.email", "email")
    return repo


@pytest.fixture
def override_settings(temp_dir: Path) -> Generator[Settings, None, None]:
    """Provide isolated commitsign settings scoped to tests."""

    import commitsign.config as config_module

    original_settings = getattr(config_module, "_settings", None)

    settings = config_module.Settings(repo_path=temp_dir)
    config_module._settings = settings

    try:
        yield settings
    finally:
        config_module._settings = original_settings
