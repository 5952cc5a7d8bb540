"""FNV-1a digest helpers.

The digest walks UTF-16 code units so that values computed here match
fingerprints already stored by earlier clients of the board format.
"""

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
_MASK_32 = 0xFFFFFFFF


def fnv1a_32(text: str) -> int:
    """Compute the 32-bit FNV-1a digest of a string.

    Args:
        text: Input string

    Returns:
        Unsigned 32-bit digest
    """
    value = FNV_OFFSET_BASIS
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        value ^= data[i] | (data[i + 1] << 8)
        value = (value * FNV_PRIME) & _MASK_32
    return value


def fnv1a_hex(text: str) -> str:
    """Return the FNV-1a digest as 8 lowercase hex characters."""
    return f"{fnv1a_32(text):08x}"
