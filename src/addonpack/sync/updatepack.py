"""Update packs: what a client must delete and fetch to match the server."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from addonpack.sync.differ import diff
from addonpack.tree.convert import dump_tree, walk_files
from addonpack.tree.models import DirNode

logger = logging.getLogger(__name__)


@dataclass
class UpdatePack:
    """Files to remove (names only) and files to add (with contents)."""

    removelist: DirNode
    addlist: DirNode

    @property
    def is_empty(self) -> bool:
        return self.removelist.is_empty() and self.addlist.is_empty()

    def to_mapping(self, *, escaped: bool = False) -> dict:
        """Render as ``{"removelist": ..., "addlist": ...}`` attribute trees."""
        return {
            "removelist": dump_tree(self.removelist, escaped=escaped),
            "addlist": dump_tree(self.addlist, escaped=escaped),
        }


def make_update_pack(from_: DirNode, to: DirNode) -> UpdatePack:
    """Build the pack turning *from_* (client copy) into *to* (server copy).

    A file whose contents changed shows up in both lists.
    """
    removelist, _ = diff(to, from_, with_content=False)
    addlist, _ = diff(from_, to, with_content=True)
    pack = UpdatePack(removelist=removelist, addlist=addlist)

    logger.debug(
        "Update pack for %r: %d to remove, %d to add",
        to.name,
        sum(1 for _ in walk_files(removelist)),
        sum(1 for _ in walk_files(addlist)),
    )
    return pack


def _copy_tree(tree: DirNode) -> DirNode:
    root = DirNode(name=tree.name, files=list(tree.files))
    stack: list[tuple[DirNode, DirNode]] = [(tree, root)]
    while stack:
        src, out = stack.pop()
        for d in src.dirs:
            child = out.add_dir(DirNode(name=d.name, files=list(d.files)))
            stack.append((d, child))
    return root


def apply_update_pack(tree: DirNode, pack: UpdatePack) -> DirNode:
    """Return a copy of *tree* with *pack* applied; *tree* is left untouched.

    Removals run first, so a changed file is dropped and then re-added with
    its new contents. Directories emptied by removals are kept.
    """
    result = _copy_tree(tree)

    stack: list[tuple[DirNode, DirNode]] = [(result, pack.removelist)]
    while stack:
        target, removals = stack.pop()
        for f in removals.files:
            existing = target.find_file(f.name)
            if existing is not None:
                target.files.remove(existing)
        for d in removals.dirs:
            sub = target.find_dir(d.name)
            if sub is not None:
                stack.append((sub, d))

    stack = [(result, pack.addlist)]
    while stack:
        target, additions = stack.pop()
        for f in additions.files:
            existing = target.find_file(f.name)
            if existing is None:
                target.add_file(f)
            else:
                target.files[target.files.index(existing)] = f
        for d in additions.dirs:
            sub = target.find_dir(d.name)
            if sub is None:
                sub = target.add_dir(DirNode(name=d.name))
            stack.append((sub, d))

    return result
