"""Hash lists, containment and directed differences between add-on trees.

Files are identified by ``(name, hash)``. A directory missing on one side
is compared against an empty directory of the same name, so a brand new
directory only counts as unchanged when it holds no files.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from addonpack.sync.hashing import compute_hash, hash_of
from addonpack.tree.convert import walk_files
from addonpack.tree.models import DirNode, FileNode

logger = logging.getLogger(__name__)


def _matching_dir(parent: DirNode, name: str) -> DirNode:
    found = parent.find_dir(name)
    return found if found is not None else DirNode(name=name)


def _file_keys(node: DirNode) -> set[tuple[str, str]]:
    return {(f.name, hash_of(f)) for f in node.files}


def _prehash(tree: DirNode, max_workers: int) -> dict[int, str]:
    """Hash every uncached file of *tree* in a thread pool, keyed by node id."""
    pending = [f for _, f in walk_files(tree) if not f.hash]
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        digests = list(pool.map(lambda f: compute_hash(f.contents or b""), pending))
    return {id(f): h for f, h in zip(pending, digests)}


def build_hashlist(tree: DirNode, max_workers: int | None = None) -> DirNode:
    """Copy *tree* with every file's contents replaced by its hash.

    With *max_workers* above one, uncached hashes are computed concurrently
    first; the result is the same as a serial run.
    """
    known = _prehash(tree, max_workers) if max_workers and max_workers > 1 else {}

    root = DirNode(name=tree.name)
    stack: list[tuple[DirNode, DirNode]] = [(tree, root)]
    count = 0
    while stack:
        src, out = stack.pop()
        for f in src.files:
            digest = known.get(id(f)) or hash_of(f)
            out.add_file(FileNode(name=f.name, hash=digest))
            count += 1
        for d in src.dirs:
            stack.append((d, out.add_dir(DirNode(name=d.name))))

    logger.debug("Built hash list for %r: %d files", tree.name, count)
    return root


def contains(from_: DirNode, to: DirNode) -> bool:
    """Whether every file of *to* exists, same name and hash, in *from_*.

    Extra files in *from_* are ignored.
    """
    stack: list[tuple[DirNode, DirNode]] = [(from_, to)]
    while stack:
        src, dst = stack.pop()
        if dst.files:
            available = _file_keys(src)
            for f in dst.files:
                if (f.name, hash_of(f)) not in available:
                    return False
        for d in dst.dirs:
            stack.append((_matching_dir(src, d.name), d))
    return True


@dataclass
class _Frame:
    node: DirNode
    parent: int | None
    slot: int
    children: list[DirNode | None] = field(default_factory=list)


def diff(
    from_: DirNode, to: DirNode, with_content: bool
) -> tuple[DirNode, bool]:
    """Return the part of *to* missing from *from_*, and whether it is non-empty.

    Subdirectories are only kept when something below them differs. With
    *with_content* the kept files carry contents and hash; otherwise only
    their names.
    """
    root = DirNode(name=to.name)
    frames: list[_Frame] = []
    stack: list[tuple[DirNode, DirNode, DirNode, int | None, int]] = [
        (from_, to, root, None, 0)
    ]

    while stack:
        src, dst, out, parent, slot = stack.pop()
        index = len(frames)

        available = _file_keys(src)
        for f in dst.files:
            digest = hash_of(f)
            if (f.name, digest) in available:
                continue
            if with_content:
                out.add_file(FileNode(name=f.name, contents=f.contents, hash=digest))
            else:
                out.add_file(FileNode(name=f.name))

        frames.append(_Frame(out, parent, slot, [None] * len(dst.dirs)))
        for i, d in enumerate(dst.dirs):
            stack.append((_matching_dir(src, d.name), d, DirNode(name=d.name), index, i))

    # Children are always framed after their parent; walking backwards
    # settles every subtree before the directory holding it.
    for frame in reversed(frames):
        frame.node.dirs = [c for c in frame.children if c is not None]
        if frame.parent is not None and not frame.node.is_empty():
            frames[frame.parent].children[frame.slot] = frame.node

    return root, not root.is_empty()
