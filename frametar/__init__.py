"""
frametar: in-memory writer for POSIX ustar archives.

Features:

- 512-byte ustar headers (old GNU magic) with the two-pass checksum that
  GNU tar, bsdtar and Python's ``tarfile`` verify.
- Ordered, duplicate-preserving entry list; ``Tarball.generate`` is a pure
  function of it and ends every archive with two zero records.
- Frame helpers that name rendered animation frames ``000.png``, ``001.png``, ...
  and drain an async frame producer into an archive.

Only regular files are written. See frametar.header for the block layout.
"""

__version__ = "0.1"

__all__ = [
    "constants",
    "errors",
    "octal",
    "header",
    "writer",
    "frames",
]

# Programmatic API: frametar.writer.Tarball for archives and
# frametar.frames.render_to_tarball for animation frame sequences.
