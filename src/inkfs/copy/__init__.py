"""Copy, move, rename and delete on the local filesystem.

Copy is permissive: an occupied destination gets a ``"name (copy N)"``
sibling instead of being overwritten.  Move and rename are strict: an
occupied destination is an error.
"""

from ._types import CollisionPlan, TransferResult
from ._resolve import (
    MAX_COPY_ATTEMPTS,
    copy_names,
    plan_target,
    resolve_target,
    _effective_target,
    _split_name,
)
from ._io import _copy_file, _copy_symlink, _copy_tree, _remove_path, _write_bytes
from ._ops import _copy, _plan_copy, _move, _rename, _delete

__all__ = [
    # Public types
    "CollisionPlan", "TransferResult",
    # Public functions
    "MAX_COPY_ATTEMPTS", "copy_names", "plan_target", "resolve_target",
    # Private but used by tests
    "_split_name",
]
