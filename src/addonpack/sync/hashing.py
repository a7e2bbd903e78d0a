"""Content hashes used as the unit of file equality."""

from __future__ import annotations

import base64
import hashlib

from addonpack.tree.models import FileNode

HASH_ALGORITHM = "md5"


def compute_hash(content: bytes) -> str:
    """Base64-encoded MD5 digest of *content*."""
    return base64.b64encode(hashlib.md5(content).digest()).decode("ascii")


def hash_of(node: FileNode) -> str:
    """Cached ``hash`` of *node* if set, otherwise the hash of its contents.

    A file without contents hashes like an empty one.
    """
    if node.hash:
        return node.hash
    return compute_hash(node.contents or b"")


def files_equal(a: FileNode, b: FileNode) -> bool:
    """Files are the same when name and content hash match."""
    return a.name == b.name and hash_of(a) == hash_of(b)
