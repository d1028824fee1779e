from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .constants import (
    BLOCK_SIZE,
    END_OF_ARCHIVE,
    MEDIA_TYPE,
    DEFAULT_MODE,
    DEFAULT_UID,
    DEFAULT_GID,
    DEFAULT_UNAME,
    DEFAULT_GNAME,
)
from .errors import EmptyArchive
from .header import build_header


@dataclass(frozen=True)
class ArchiveEntry:
    name: str
    content: bytes
    mtime: int

    @property
    def size(self) -> int:
        return len(self.content)


def padding_for(size: int) -> int:
    """Number of zero bytes that bring ``size`` up to the next block boundary."""
    return -size % BLOCK_SIZE


def entry_block(entry: ArchiveEntry, **header_fields) -> bytes:
    """Header, content and zero padding for one entry."""
    header = build_header(entry.name, entry.size, entry.mtime, **header_fields)
    return header + entry.content + b"\x00" * padding_for(entry.size)


class Tarball:
    """In-memory builder for ustar archives of regular files.

    Entries are kept in insertion order and ``generate`` derives the archive
    from them alone, so it may be called any number of times, and files may
    still be added afterwards; the next ``generate`` includes them.
    """

    media_type = MEDIA_TYPE

    def __init__(
        self,
        *,
        mode: int = DEFAULT_MODE,
        uid: int = DEFAULT_UID,
        gid: int = DEFAULT_GID,
        uname: str = DEFAULT_UNAME,
        gname: str = DEFAULT_GNAME,
    ):
        self.header_fields = {
            "mode": mode,
            "uid": uid,
            "gid": gid,
            "uname": uname,
            "gname": gname,
        }
        self._entries: List[ArchiveEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ArchiveEntry]:
        return iter(tuple(self._entries))

    @property
    def entries(self) -> Tuple[ArchiveEntry, ...]:
        return tuple(self._entries)

    def add_file(self, name: str, content: bytes, *, mtime: Optional[int] = None) -> ArchiveEntry:
        """Append a regular file.

        The header is built once here so that bad names, oversized content
        or an unencodable mtime fail at the call that introduced them.
        ``mtime`` defaults to the current time in whole seconds.
        """
        entry = ArchiveEntry(
            name=name,
            content=memoryview(content).tobytes(),
            mtime=int(time.time()) if mtime is None else int(mtime),
        )
        build_header(entry.name, entry.size, entry.mtime, **self.header_fields)
        self._entries.append(entry)
        return entry

    def generate(self) -> bytes:
        """Return the complete archive: every entry block, then two zero records."""
        if not self._entries:
            raise EmptyArchive("Cannot create empty tar archive")
        out = bytearray()
        for e in self._entries:
            out += entry_block(e, **self.header_fields)
        out += END_OF_ARCHIVE
        return bytes(out)

    def save(self, out_path: str) -> int:
        data = self.generate()
        with open(out_path, "wb") as f:
            f.write(data)
        return len(data)
