"""commitsign CLI application with Typer."""

import logging
import sys
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from commitsign import __version__
from commitsign.bootstrap import bootstrap_application
from commitsign.config import get_settings, set_settings
from commitsign.errors import CommitSignError, ConfigStoreError

app = typer.Typer(
    name="commitsign",
    help="Resolve the commit signing method from git configuration and sign commit data",
    add_completion=True,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"commitsign version {__version__}")
        raise typer.Exit()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )


def _fail(exc: Exception) -> NoReturn:
    typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    repo: Annotated[
        Path | None,
        typer.Option("--repo", help="Repository whose git configuration is read"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """commitsign - sign git commit data with the configured OpenPGP program."""
    settings = get_settings()
    if repo:
        settings.repo_path = repo
    if verbose:
        settings.log_level = "DEBUG"
    set_settings(settings)
    _configure_logging(settings.log_level)


@app.command("resolve")
def resolve_command(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output the resolved signer as JSON"),
    ] = False,
) -> None:
    """Show which program and signing key would be used."""
    container = bootstrap_application()

    try:
        signer = container.build_signer()
    except (CommitSignError, ConfigStoreError) as exc:
        _fail(exc)

    if json_output:
        from commitsign.utils.cli_output import json_response

        typer.echo(
            json_response(
                "signer",
                1,
                method="shellouts",
                format="openpgp",
                program=signer.program,
                signing_key=signer.signing_key,
            )
        )
        return

    typer.echo(f"program:     {signer.program}")
    typer.echo(f"signing key: {signer.signing_key}")


@app.command("sign")
def sign_command(
    input_path: Annotated[
        Path | None,
        typer.Option("--input", "-i", help="Commit buffer to sign (defaults to stdin)"),
    ] = None,
    output_path: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the signature here (defaults to stdout)"),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", min=0.001, help="Kill the signing program after N seconds"),
    ] = None,
) -> None:
    """Sign a serialized commit buffer and emit the armored signature."""
    settings = get_settings()
    if timeout is not None:
        settings.sign_timeout_seconds = timeout
    container = bootstrap_application(settings)

    try:
        # bytes in and out so CRLF line endings reach the signer unchanged
        raw = input_path.read_bytes() if input_path is not None else sys.stdin.buffer.read()
        commit = raw.decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _fail(exc)

    try:
        signer = container.build_signer()
        signature = signer.sign(commit)
    except (CommitSignError, ConfigStoreError) as exc:
        _fail(exc)

    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(signature.encode("utf-8"))
        typer.secho(f"Signature written to {output_path}", fg=typer.colors.GREEN, err=True)
        return

    typer.echo(signature, nl=False)


if __name__ == "__main__":
    app()
