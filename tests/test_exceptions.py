"""Tests for the exception hierarchy."""

import errno

import pytest

from inkfs.exceptions import (
    AlreadyExistsError,
    DestinationExistsError,
    ErrorKind,
    FSError,
    InvalidDataError,
    InvalidPathError,
    IOFailureError,
    PathNotFoundError,
    SourceMissingError,
    TooManyCollisionsError,
    WrongTypeError,
    io_failure,
)


@pytest.mark.parametrize("cls, kind, builtin", [
    (PathNotFoundError, ErrorKind.NOT_FOUND, FileNotFoundError),
    (SourceMissingError, ErrorKind.SOURCE_MISSING, FileNotFoundError),
    (AlreadyExistsError, ErrorKind.ALREADY_EXISTS, FileExistsError),
    (DestinationExistsError, ErrorKind.DESTINATION_EXISTS, FileExistsError),
    (WrongTypeError, ErrorKind.WRONG_TYPE, OSError),
    (TooManyCollisionsError, ErrorKind.TOO_MANY_COLLISIONS, Exception),
    (InvalidPathError, ErrorKind.INVALID_PATH, ValueError),
    (InvalidDataError, ErrorKind.INVALID_DATA, ValueError),
    (IOFailureError, ErrorKind.IO_FAILURE, OSError),
])
def test_kinds_and_builtin_bases(cls, kind, builtin):
    exc = cls("boom", op="test_op", path="/tmp/x")
    assert isinstance(exc, FSError)
    assert isinstance(exc, builtin)
    assert exc.kind is kind
    assert str(exc) == "boom"
    assert exc.op == "test_op"
    assert exc.path == "/tmp/x"
    assert exc.dest is None


def test_kind_str_is_value():
    assert str(ErrorKind.DESTINATION_EXISTS) == "destination_exists"


def test_io_failure_wraps_oserror(tmp_path):
    err = PermissionError(errno.EACCES, "Permission denied")
    exc = io_failure("copy_file", err, tmp_path / "a", tmp_path / "b")
    assert isinstance(exc, IOFailureError)
    assert exc.errno == errno.EACCES
    assert str(exc) == f"copy_file failed for {tmp_path / 'a'} -> {tmp_path / 'b'}: Permission denied"
    assert exc.dest == str(tmp_path / "b")
