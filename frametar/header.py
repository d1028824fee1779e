from __future__ import annotations

from .constants import (
    BLOCK_SIZE,
    NAME_OFFSET,
    NAME_LEN,
    MODE_OFFSET,
    MODE_LEN,
    UID_OFFSET,
    UID_LEN,
    GID_OFFSET,
    GID_LEN,
    SIZE_OFFSET,
    SIZE_LEN,
    MTIME_OFFSET,
    MTIME_LEN,
    CHKSUM_OFFSET,
    CHKSUM_LEN,
    CHKSUM_DIGITS,
    TYPEFLAG_OFFSET,
    MAGIC_OFFSET,
    MAGIC,
    VERSION_OFFSET,
    VERSION,
    UNAME_OFFSET,
    UNAME_LEN,
    GNAME_OFFSET,
    GNAME_LEN,
    REGTYPE,
    DEFAULT_MODE,
    DEFAULT_UID,
    DEFAULT_GID,
    DEFAULT_UNAME,
    DEFAULT_GNAME,
)
from .errors import FieldOverflow, NameTooLong
from .octal import ascii_bytes, tar_number, write_number, write_string


# Header block layout (512 bytes, based on tar(5) and headers written by GNU tar)
#  - name[100] mode[8] uid[8] gid[8] size[12] mtime[12]
#  - chksum[8] typeflag[1] linkname[100]
#  - magic[6] version[2] uname[32] gname[32]
#  - devmajor[8] devminor[8] prefix[155] pad[12]
# linkname, devmajor, devminor, prefix and pad are left as NULs.
_CHKSUM_BLANK = b" " * CHKSUM_LEN


def encode_name(name: str) -> bytes:
    """Encode an entry name for the header name field.

    A name of exactly 100 bytes fills the field without a NUL terminator.
    Longer names are rejected; the prefix field is not used because the
    ``"ustar "`` magic marks the old GNU header, which stores other data there.
    """
    raw = ascii_bytes(name)
    if len(raw) > NAME_LEN:
        raise NameTooLong(f"Name {name!r} is {len(raw)} bytes; the name field holds {NAME_LEN}")
    return raw


def _check_label(label: str, what: str, length: int) -> None:
    if len(ascii_bytes(label)) > length - 1:
        raise FieldOverflow(f"{what} {label!r} does not fit a {length}-byte field")


def header_checksum(header: bytes) -> int:
    """Sum of all header bytes with the checksum field counted as spaces."""
    if len(header) != BLOCK_SIZE:
        raise ValueError(f"Header must be {BLOCK_SIZE} bytes, got {len(header)}")
    return (
        sum(header[:CHKSUM_OFFSET])
        + sum(_CHKSUM_BLANK)
        + sum(header[CHKSUM_OFFSET + CHKSUM_LEN :])
    )


def build_header(
    name: str,
    size: int,
    mtime: int,
    *,
    mode: int = DEFAULT_MODE,
    uid: int = DEFAULT_UID,
    gid: int = DEFAULT_GID,
    uname: str = DEFAULT_UNAME,
    gname: str = DEFAULT_GNAME,
) -> bytes:
    """Build the 512-byte header block for one regular file.

    Raises:
        NonAsciiName: ``name`` has a character above U+00FF.
        NameTooLong: ``name`` encodes to more than 100 bytes.
        FieldOverflow: ``size``, ``mtime`` or another field does not fit.
    """
    raw_name = encode_name(name)
    _check_label(uname, "uname", UNAME_LEN)
    _check_label(gname, "gname", GNAME_LEN)

    buf = bytearray(BLOCK_SIZE)
    buf[NAME_OFFSET : NAME_OFFSET + len(raw_name)] = raw_name
    write_number(buf, mode, MODE_OFFSET, MODE_LEN)
    write_number(buf, uid, UID_OFFSET, UID_LEN)
    write_number(buf, gid, GID_OFFSET, GID_LEN)
    write_number(buf, size, SIZE_OFFSET, SIZE_LEN)
    write_number(buf, mtime, MTIME_OFFSET, MTIME_LEN)
    # Checksum is computed with its own field set to spaces
    buf[CHKSUM_OFFSET : CHKSUM_OFFSET + CHKSUM_LEN] = _CHKSUM_BLANK
    write_string(buf, REGTYPE, TYPEFLAG_OFFSET)
    write_string(buf, MAGIC, MAGIC_OFFSET)
    buf[VERSION_OFFSET : VERSION_OFFSET + len(VERSION)] = VERSION
    write_string(buf, uname, UNAME_OFFSET)
    write_string(buf, gname, GNAME_OFFSET)

    chksum = sum(buf)
    # value[6] NUL space
    digits = tar_number(chksum, CHKSUM_DIGITS + 1).encode("ascii")
    buf[CHKSUM_OFFSET : CHKSUM_OFFSET + CHKSUM_LEN] = digits + b"\x00 "
    return bytes(buf)
