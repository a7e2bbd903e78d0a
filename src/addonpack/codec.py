"""Binary escaping for file contents stored in the textual tree format.

Each byte in :data:`ESCAPED_BYTES` is written as ``ESCAPE_CHAR`` followed by
the byte plus one (mod 256). Decoding reverses that by decrementing the
byte after each escape marker.
"""

from __future__ import annotations

ESCAPE_CHAR = 0x01

# NUL, the escape marker, CR (mangled on Windows), 0xFE (parser metadata marker)
ESCAPED_BYTES = frozenset({0x00, ESCAPE_CHAR, 0x0D, 0xFE})


def needs_escaping(byte: int) -> bool:
    return byte in ESCAPED_BYTES


def encode_binary(data: bytes) -> bytes:
    """Escape *data* so it survives the textual container."""
    if not any(b in ESCAPED_BYTES for b in data):
        return bytes(data)

    out = bytearray()
    for b in data:
        if b in ESCAPED_BYTES:
            out.append(ESCAPE_CHAR)
            out.append((b + 1) & 0xFF)
        else:
            out.append(b)
    return bytes(out)


def decode_binary(data: bytes) -> bytes:
    """Reverse :func:`encode_binary`.

    A trailing escape marker with nothing after it is kept as-is.
    """
    if ESCAPE_CHAR not in data:
        return bytes(data)

    out = bytearray()
    i = 0
    n = len(data)
    while i < n:
        b = data[i]
        i += 1
        if b == ESCAPE_CHAR and i < n:
            b = (data[i] - 1) & 0xFF
            i += 1
        out.append(b)
    return bytes(out)
