"""Tests for viewer exceptions."""

import pytest

from core.errors import (AccessError, DialogError, ErrorKind, InvalidArgumentError, NoImagesFound,
                         NoSelectionError, NotADirectoryPathError, NotInitializedError, ReadError,
                         ViewerError)


@pytest.mark.parametrize("cls, kind", [
    (NotInitializedError, ErrorKind.NOT_INITIALIZED),
    (DialogError, ErrorKind.DIALOG_ERROR),
    (NoSelectionError, ErrorKind.NO_SELECTION),
    (InvalidArgumentError, ErrorKind.INVALID_ARGUMENT),
    (AccessError, ErrorKind.ACCESS_ERROR),
    (NotADirectoryPathError, ErrorKind.NOT_A_DIRECTORY),
    (ReadError, ErrorKind.READ_ERROR),
    (NoImagesFound, ErrorKind.NO_IMAGES_FOUND),
])
def test_every_error_has_its_kind(cls, kind) -> None:
    err = cls("boom")
    assert isinstance(err, ViewerError)
    assert err.kind is kind


def test_error_without_cause() -> None:
    err = NoSelectionError("No directory selected")
    assert err.cause is None
    assert err.__cause__ is None
    assert str(err) == "No directory selected"


def test_error_keeps_cause() -> None:
    cause = OSError(2, "No such file or directory")
    err = AccessError("Cannot access directory /x", cause)
    assert err.cause is cause
    assert err.__cause__ is cause
    assert str(err).startswith("Cannot access directory /x: ")
    assert "No such file or directory" in str(err)
