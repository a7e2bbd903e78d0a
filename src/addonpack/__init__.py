"""addonpack - validation and update packs for add-on content trees."""

from addonpack.addon_types import AddonType, get_addon_type, get_addon_type_string
from addonpack.codec import decode_binary, encode_binary
from addonpack.config import AddonPackConfig, load_config
from addonpack.exceptions import AddonPackError, MalformedTreeError, TreeDepthError
from addonpack.pipeline import AddonPipeline
from addonpack.sync import (
    UpdatePack,
    apply_update_pack,
    build_hashlist,
    contains,
    diff,
    hash_of,
    make_update_pack,
)
from addonpack.tree import DirNode, FileNode, dump_tree, parse_tree
from addonpack.validation import (
    AdmissionReport,
    check_addon,
    check_case_insensitive_duplicates,
    check_names_legal,
    find_case_duplicates,
    find_illegal_names,
    is_legal_addon_name,
    is_legal_filename,
)

__version__ = "0.1.0"

__all__ = [
    "AddonPackConfig",
    "AddonPackError",
    "AddonPipeline",
    "AddonType",
    "AdmissionReport",
    "DirNode",
    "FileNode",
    "MalformedTreeError",
    "TreeDepthError",
    "UpdatePack",
    "apply_update_pack",
    "build_hashlist",
    "check_addon",
    "check_case_insensitive_duplicates",
    "check_names_legal",
    "contains",
    "decode_binary",
    "diff",
    "dump_tree",
    "encode_binary",
    "find_case_duplicates",
    "find_illegal_names",
    "get_addon_type",
    "get_addon_type_string",
    "hash_of",
    "is_legal_addon_name",
    "is_legal_filename",
    "load_config",
    "make_update_pack",
    "parse_tree",
]
