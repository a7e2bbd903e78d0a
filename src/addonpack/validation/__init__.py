"""Name legality and duplicate checks for untrusted add-on trees."""

from addonpack.validation.checker import AdmissionReport, check_addon
from addonpack.validation.duplicates import (
    check_case_insensitive_duplicates,
    check_names_legal,
    find_case_duplicates,
    find_illegal_names,
)
from addonpack.validation.names import (
    DOS_DEVICE_NAMES,
    MAX_FILENAME_BYTES,
    is_legal_addon_name,
    is_legal_filename,
)

__all__ = [
    "DOS_DEVICE_NAMES",
    "MAX_FILENAME_BYTES",
    "AdmissionReport",
    "check_addon",
    "check_case_insensitive_duplicates",
    "check_names_legal",
    "find_case_duplicates",
    "find_illegal_names",
    "is_legal_addon_name",
    "is_legal_filename",
]
