"""Conversion between host attribute trees and typed nodes.

The host application exchanges add-ons as nested mappings shaped like its
textual container format::

    {"name": "My_Addon",
     "file": [{"name": "_main.cfg", "contents": b"..."}],
     "dir": [{"name": "maps", "file": [...], "dir": [...]}]}

Trees are parsed once here; everything downstream works on
:class:`~addonpack.tree.models.DirNode` and never re-checks attributes.
All walks use an explicit stack since tree depth is untrusted input.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from addonpack.codec import decode_binary, encode_binary
from addonpack.exceptions import MalformedTreeError, TreeDepthError
from addonpack.tree.models import DirNode, FileNode

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64


def _join(prefix: str, name: str) -> str:
    return f"{prefix}/{name}" if prefix else name


def _require_name(entry: Any, path: str) -> str:
    if not isinstance(entry, Mapping):
        raise MalformedTreeError(path, f"expected a mapping, got {type(entry).__name__}")
    if "name" not in entry:
        raise MalformedTreeError(path, "missing 'name'")
    name = entry["name"]
    if not isinstance(name, str):
        raise MalformedTreeError(path, f"'name' should be str, got {type(name).__name__}")
    return name


def _children(entry: Mapping, tag: str, path: str) -> list:
    children = entry.get(tag, [])
    if not isinstance(children, list):
        raise MalformedTreeError(path, f"'{tag}' should be a list, got {type(children).__name__}")
    return children


def _to_bytes(value: Any, path: str) -> bytes | None:
    if value is None or isinstance(value, bytes):
        return value
    if isinstance(value, str):
        try:
            return value.encode("latin-1")
        except UnicodeEncodeError as e:
            raise MalformedTreeError(path, "'contents' string is not latin-1") from e
    raise MalformedTreeError(path, f"'contents' should be bytes, got {type(value).__name__}")


def _parse_file(entry: Any, prefix: str, escaped: bool) -> FileNode:
    name = _require_name(entry, prefix)
    path = _join(prefix, name)
    contents = _to_bytes(entry.get("contents"), path)
    if escaped and contents is not None:
        contents = decode_binary(contents)
    file_hash = entry.get("hash")
    if file_hash is not None and not isinstance(file_hash, str):
        raise MalformedTreeError(path, f"'hash' should be str, got {type(file_hash).__name__}")
    return FileNode(name=name, contents=contents, hash=file_hash or None)


def parse_tree(
    data: Mapping,
    *,
    escaped: bool = False,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> DirNode:
    """Parse a host attribute tree into a :class:`DirNode`.

    Raises :class:`MalformedTreeError` for missing or ill-typed attributes and
    :class:`TreeDepthError` when directories nest deeper than *max_depth*.
    With *escaped* set, file contents are run through the binary codec.
    """
    root = DirNode(name=_require_name(data, ""))
    stack: list[tuple[Mapping, DirNode, str, int]] = [(data, root, "", 0)]
    file_count = 0

    while stack:
        entry, node, path, depth = stack.pop()
        for f in _children(entry, "file", path):
            node.add_file(_parse_file(f, path, escaped))
            file_count += 1

        subdirs = _children(entry, "dir", path)
        if subdirs and depth >= max_depth:
            raise TreeDepthError(path, max_depth)
        pending = []
        for d in subdirs:
            name = _require_name(d, path)
            child = node.add_dir(DirNode(name=name))
            pending.append((d, child, _join(path, name), depth + 1))
        stack.extend(reversed(pending))

    logger.debug("Parsed tree %r with %d files", root.name, file_count)
    return root


def _dump_file(f: FileNode, escaped: bool) -> dict:
    out: dict[str, Any] = {"name": f.name}
    if f.contents is not None:
        out["contents"] = encode_binary(f.contents) if escaped else f.contents
    if f.hash:
        out["hash"] = f.hash
    return out


def dump_tree(node: DirNode, *, escaped: bool = False) -> dict:
    """Turn a :class:`DirNode` back into a host attribute tree."""
    root: dict[str, Any] = {"name": node.name}
    stack: list[tuple[DirNode, dict]] = [(node, root)]

    while stack:
        current, out = stack.pop()
        if current.files:
            out["file"] = [_dump_file(f, escaped) for f in current.files]
        if current.dirs:
            out["dir"] = []
            for d in current.dirs:
                child = {"name": d.name}
                out["dir"].append(child)
                stack.append((d, child))

    return root


def walk_files(tree: DirNode) -> Iterator[tuple[str, FileNode]]:
    """Yield ``(relative_path, file)`` for every file below *tree*."""
    stack: list[tuple[DirNode, str]] = [(tree, "")]
    while stack:
        node, prefix = stack.pop()
        for f in node.files:
            yield _join(prefix, f.name), f
        for d in reversed(node.dirs):
            stack.append((d, _join(prefix, d.name)))
