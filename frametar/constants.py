# Record geometry
BLOCK_SIZE = 512
RECORD_SIZE = BLOCK_SIZE
END_OF_ARCHIVE = b"\x00" * (2 * BLOCK_SIZE)  # two zero records

# Header field offsets and widths (POSIX ustar / old GNU layout)
NAME_OFFSET, NAME_LEN = 0x000, 100
MODE_OFFSET, MODE_LEN = 0x064, 8
UID_OFFSET, UID_LEN = 0x06C, 8
GID_OFFSET, GID_LEN = 0x074, 8
SIZE_OFFSET, SIZE_LEN = 0x07C, 12
MTIME_OFFSET, MTIME_LEN = 0x088, 12
CHKSUM_OFFSET, CHKSUM_LEN = 0x094, 8
TYPEFLAG_OFFSET = 0x09C
MAGIC_OFFSET = 0x101
VERSION_OFFSET = 0x107
UNAME_OFFSET, UNAME_LEN = 0x109, 32
GNAME_OFFSET, GNAME_LEN = 0x129, 32

# Fixed header values
MAGIC = "ustar "           # early draft POSIX magic, as GNU tar writes it
VERSION = b"\x20\x00"
REGTYPE = "0"
CHKSUM_DIGITS = 6          # followed by NUL and a space

DEFAULT_MODE = 0o644
DEFAULT_UID = 0
DEFAULT_GID = 0
DEFAULT_UNAME = "root"
DEFAULT_GNAME = "root"

MEDIA_TYPE = "application/x-tar"
