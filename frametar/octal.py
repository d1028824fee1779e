from __future__ import annotations

from .errors import FieldOverflow, NonAsciiName


def tar_number(n: int, length: int) -> str:
    """Encode ``n`` as zero-padded ASCII octal for a tar header field.

    Args:
        n: Non-negative integer to encode.
        length: Width of the header field, including its NUL terminator.

    Returns:
        A string of ``length - 1`` octal digits. The caller writes the NUL.
    """
    if n < 0:
        raise FieldOverflow(f"Cannot encode negative number {n} in a tar field")
    octal = format(n, "o")
    width = length - 1
    if len(octal) > width:
        raise FieldOverflow(f"Number {n} needs {len(octal)} octal digits; field holds {width}")
    return octal.rjust(width, "0")


def ascii_bytes(s: str) -> bytes:
    """Return the single-byte encoding of ``s`` (code points 0..255)."""
    try:
        return s.encode("latin-1")
    except UnicodeEncodeError as exc:
        bad = s[exc.start]
        raise NonAsciiName(f"Character {bad!r} (U+{ord(bad):04X}) at index {exc.start} of {s!r} is not single-byte") from exc


def write_string(buf: bytearray, s: str, offset: int) -> None:
    raw = ascii_bytes(s)
    buf[offset : offset + len(raw)] = raw


def write_number(buf: bytearray, n: int, offset: int, length: int) -> None:
    # Last byte of the field stays NUL from the zeroed buffer
    write_string(buf, tar_number(n, length), offset)
