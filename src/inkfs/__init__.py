from .fs import FS
from .tree import FileNode, read_directory
from .config import ConfigStore
from .copy import CollisionPlan, TransferResult, MAX_COPY_ATTEMPTS, plan_target, resolve_target
from .exceptions import (
    ErrorKind,
    FSError,
    PathNotFoundError,
    SourceMissingError,
    AlreadyExistsError,
    DestinationExistsError,
    WrongTypeError,
    TooManyCollisionsError,
    InvalidPathError,
    InvalidDataError,
    IOFailureError,
)
from .log import setup_logging

__all__ = [
    "FS", "FileNode", "read_directory", "ConfigStore",
    "CollisionPlan", "TransferResult", "MAX_COPY_ATTEMPTS", "plan_target", "resolve_target",
    "ErrorKind", "FSError", "PathNotFoundError", "SourceMissingError",
    "AlreadyExistsError", "DestinationExistsError", "WrongTypeError",
    "TooManyCollisionsError", "InvalidPathError", "InvalidDataError", "IOFailureError",
    "setup_logging",
]
