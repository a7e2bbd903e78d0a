"""Legality rules for add-on names and path components.

Path components must be materializable on every platform clients run on,
so the rules are the union of Windows, macOS and POSIX restrictions.
"""

from __future__ import annotations

import re

MAX_FILENAME_BYTES = 255

_ADDON_NAME_RE = re.compile(rb"[A-Za-z0-9_-]+")

# Reserved DOS device names on Windows XP and later.
DOS_DEVICE_NAMES = frozenset({
    b"NUL", b"CON", b"AUX", b"PRN",
    # Console API devices
    b"CONIN$", b"CONOUT$",
    # Configuration-dependent devices
    b"COM1", b"COM2", b"COM3", b"COM4", b"COM5", b"COM6", b"COM7", b"COM8", b"COM9",
    b"LPT1", b"LPT2", b"LPT3", b"LPT4", b"LPT5", b"LPT6", b"LPT7", b"LPT8", b"LPT9",
})

ILLEGAL_FILENAME_CHARS = frozenset(' "*/:<>?\\|~\x7f')


def _as_bytes(name: str | bytes) -> bytes | None:
    if isinstance(name, bytes):
        return name
    try:
        # surrogateescape maps smuggled raw bytes back; other lone surrogates fail
        return name.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return None


def _char_illegal(c: str) -> bool:
    cp = ord(c)
    return (
        c in ILLEGAL_FILENAME_CHARS
        or cp < 0x20                # C0 control characters
        or 0x80 <= cp < 0xA0        # C1 control characters
        or 0xD800 <= cp < 0xE000    # surrogates
    )


def is_legal_addon_name(name: str | bytes) -> bool:
    """Add-on names are non-empty runs of ASCII letters, digits, ``-`` and ``_``."""
    raw = _as_bytes(name)
    return raw is not None and _ADDON_NAME_RE.fullmatch(raw) is not None


def is_legal_filename(name: str | bytes) -> bool:
    """Whether *name* is safe to use as a file or directory name.

    Accepts either text or the raw UTF-8 bytes received from a client.
    """
    raw = _as_bytes(name)
    if raw is None:
        return False
    if not raw or raw.endswith(b".") or b".." in raw or len(raw) > MAX_FILENAME_BYTES:
        return False

    # Windows redirects "CON.foo.bar" to CON, so the stem ends at the *first*
    # dot. "CON:" is caught by the ':' rule below.
    stem = raw.split(b".", 1)[0].upper()
    if stem in DOS_DEVICE_NAMES:
        return False

    try:
        decoded = raw.decode("utf-8")
    except UnicodeDecodeError:
        return False
    if decoded.encode("utf-8") != raw:
        return False

    return not any(_char_illegal(c) for c in decoded)
