"""Error taxonomy messages and kinds."""

from __future__ import annotations

import pytest

from commitsign.errors import (
    CommitSignError,
    SignBuilderError,
    SignBuilderErrorKind,
    SignError,
    SignErrorKind,
)


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (
            SignBuilderError.invalid_format("bogus"),
            "Failed to derive a commit signing method from git configuration 'gpg.format': bogus",
        ),
        (
            SignBuilderError.gpg_signing_key("missing"),
            "Failed to retrieve 'user.signingkey' from the git configuration: missing",
        ),
        (SignBuilderError.signature("no name"), "Failed to build signing signature: no name"),
        (
            SignBuilderError.method_not_implemented("x509"),
            "Select signing method 'x509' has not been implemented",
        ),
        (SignError.spawn("ENOENT"), "Failed to spawn signing process: ENOENT"),
        (SignError.stdin(), "Failed to acquire standard input handler"),
        (
            SignError.write_buffer("broken pipe"),
            "Failed to write buffer to standard input of signing process: broken pipe",
        ),
        (SignError.output("EIO"), "Failed to get output of signing process call: EIO"),
        (SignError.shellout("exit 2"), "Failed to execute signing process: exit 2"),
    ],
)
def test_messages(error: CommitSignError, message: str) -> None:
    assert str(error) == message


def test_taxonomies_do_not_overlap() -> None:
    builder_error = SignBuilderError.invalid_format("x")
    sign_error = SignError.shellout("x")

    assert isinstance(builder_error, CommitSignError)
    assert isinstance(sign_error, CommitSignError)
    assert not isinstance(builder_error, SignError)
    assert not isinstance(sign_error, SignBuilderError)


def test_kind_and_detail_are_exposed() -> None:
    error = SignError.write_buffer("broken pipe")

    assert error.kind is SignErrorKind.WRITE_BUFFER
    assert error.detail == "broken pipe"
    assert SignError.stdin().detail == ""


def test_every_kind_has_a_message() -> None:
    assert set(SignBuilderError.templates) == set(SignBuilderErrorKind)
    assert set(SignError.templates) == set(SignErrorKind)
