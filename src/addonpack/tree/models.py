"""Typed nodes for add-on directory trees."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FileNode:
    """A file entry. ``contents`` is absent on hash lists and remove lists."""

    name: str
    contents: bytes | None = None
    hash: str | None = None


@dataclass
class DirNode:
    """A directory entry holding files and subdirectories in insertion order."""

    name: str = ""
    files: list[FileNode] = field(default_factory=list)
    dirs: list[DirNode] = field(default_factory=list)

    def find_file(self, name: str) -> FileNode | None:
        """Return the first file called *name*, if any."""
        for f in self.files:
            if f.name == name:
                return f
        return None

    def find_dir(self, name: str) -> DirNode | None:
        """Return the first subdirectory called *name*, if any."""
        for d in self.dirs:
            if d.name == name:
                return d
        return None

    def add_file(self, node: FileNode) -> FileNode:
        self.files.append(node)
        return node

    def add_dir(self, node: DirNode) -> DirNode:
        self.dirs.append(node)
        return node

    def is_empty(self) -> bool:
        return not self.files and not self.dirs
