"""Typed add-on trees and conversion from host attribute trees."""

from addonpack.tree.convert import DEFAULT_MAX_DEPTH, dump_tree, parse_tree, walk_files
from addonpack.tree.models import DirNode, FileNode

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DirNode",
    "FileNode",
    "dump_tree",
    "parse_tree",
    "walk_files",
]
