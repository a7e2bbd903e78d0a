"""Tree-wide name checks: illegal components and case-insensitive clashes.

Both checks run in one of two modes. With a ``badlist`` every offending
relative path is appended to it; without one the walk stops at the first
problem. The return value is True when the walk found nothing.
"""

from __future__ import annotations

from dataclasses import dataclass

from addonpack.tree.models import DirNode
from addonpack.validation.names import is_legal_filename


def check_names_legal(tree: DirNode, badlist: list[str] | None = None) -> bool:
    """Check every file and directory name below *tree*.

    Illegal directories are reported with a trailing ``/`` and are still
    descended into. Each subdirectory is finished before its next sibling
    is looked at, so paths come out depth first. Paths start below *tree*,
    so passing an add-on's parent directory yields paths such as
    ``Addon_Name/~bad``.
    """
    found = 0
    # (node, prefix, pending): a pending entry still needs its own name checked
    stack: list[tuple[DirNode, str, bool]] = [(tree, "", False)]

    while stack:
        node, prefix, pending = stack.pop()
        if pending:
            new_prefix = prefix + node.name
            if not is_legal_filename(node.name):
                if badlist is None:
                    return False
                badlist.append(new_prefix + "/")
                found += 1
            stack.append((node, new_prefix + "/", False))
            continue

        for f in node.files:
            if not is_legal_filename(f.name):
                if badlist is None:
                    return False
                badlist.append(prefix + f.name)
                found += 1
        stack.extend((d, prefix, True) for d in reversed(node.dirs))

    return found == 0


def find_illegal_names(tree: DirNode) -> list[str]:
    badlist: list[str] = []
    check_names_legal(tree, badlist)
    return badlist


@dataclass
class _FirstSeen:
    path: str


class _Reported:
    pass


_REPORTED = _Reported()

_Seen = dict[bytes, "_FirstSeen | _Reported"]


def _note_name(seen: _Seen, prefix: str, name: str, badlist: list[str] | None) -> int | None:
    """Record *name* in its directory's namespace.

    Returns how many paths were appended, or None on a clash without a
    badlist.
    """
    # bytes.lower() folds ASCII only, independent of locale
    key = name.encode("utf-8", "surrogatepass").lower()
    with_prefix = prefix + name
    state = seen.get(key)
    if state is None:
        seen[key] = _FirstSeen(with_prefix)
        return 0
    if badlist is None:
        return None

    added = 0
    if isinstance(state, _FirstSeen):
        badlist.append(state.path)
        seen[key] = _REPORTED
        added += 1
    badlist.append(with_prefix)
    return added + 1


def check_case_insensitive_duplicates(tree: DirNode, badlist: list[str] | None = None) -> bool:
    """Check for names differing only in ASCII case within one directory.

    Files and subdirectories of a directory share one namespace. The first
    clash on a name reports both paths; later clashes report only the new
    one. Clashing directories are each descended into under their own name,
    and each subdirectory is finished before its next sibling is checked.
    """
    found = 0
    # (node, prefix, parent namespace); a namespace means the node's own
    # name still has to be recorded in it before descending
    stack: list[tuple[DirNode, str, _Seen | None]] = [(tree, "", None)]

    while stack:
        node, prefix, parent_seen = stack.pop()
        if parent_seen is not None:
            added = _note_name(parent_seen, prefix, node.name, badlist)
            if added is None:
                return False
            found += added
            stack.append((node, prefix + node.name + "/", None))
            continue

        seen: _Seen = {}
        for f in node.files:
            added = _note_name(seen, prefix, f.name, badlist)
            if added is None:
                return False
            found += added
        stack.extend((d, prefix, seen) for d in reversed(node.dirs))

    return found == 0


def find_case_duplicates(tree: DirNode) -> list[str]:
    badlist: list[str] = []
    check_case_insensitive_duplicates(tree, badlist)
    return badlist
