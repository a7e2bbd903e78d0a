"""Hash lists, containment checks and update packs for add-on trees."""

from addonpack.sync.differ import build_hashlist, contains, diff
from addonpack.sync.hashing import HASH_ALGORITHM, compute_hash, files_equal, hash_of
from addonpack.sync.updatepack import UpdatePack, apply_update_pack, make_update_pack

__all__ = [
    "HASH_ALGORITHM",
    "UpdatePack",
    "apply_update_pack",
    "build_hashlist",
    "compute_hash",
    "contains",
    "diff",
    "files_equal",
    "hash_of",
    "make_update_pack",
]
