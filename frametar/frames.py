"""
Boundary between an animation renderer and the tar writer.

The renderer itself (painting each frame and encoding it as PNG) lives
elsewhere. This module fixes the frame timing and file naming, and drains
the renderer's async frame sequence into a :class:`~frametar.writer.Tarball`
one frame at a time, in production order.
"""

from __future__ import annotations

import math
from typing import Any, AsyncIterable, Callable, Iterator, Optional, Protocol

from .writer import Tarball


FRAME_SUFFIX = ".png"


class Animator(Protocol):
    width: int
    height: int
    fps: float
    duration: float

    # Optional: ``async def load(self) -> None`` runs once before the first frame.

    def render(self, t: float, surface: Any) -> None:
        ...


def frame_count(fps: float, duration: float) -> int:
    if fps <= 0:
        raise ValueError("fps must be positive")
    if duration < 0:
        raise ValueError("duration must be non-negative")
    return int(math.floor(fps * duration))


def frame_times(fps: float, duration: float) -> Iterator[float]:
    """Yield frame times from 0 in steps of ``1/fps``, one per frame."""
    for i in range(frame_count(fps, duration)):
        yield i / fps


def frame_digits(count: int) -> int:
    return len(str(max(count, 1)))


def frame_name(index: int, digits: int) -> str:
    """``frame_name(7, 3) == "007.png"``"""
    return str(index).zfill(digits) + FRAME_SUFFIX


async def archive_frames(
    frames: AsyncIterable[bytes],
    count: int,
    *,
    tarball: Optional[Tarball] = None,
    mtime: Optional[int] = None,
) -> Tarball:
    """Add each encoded frame to ``tarball`` under its zero-padded index name."""
    if tarball is None:
        tarball = Tarball()
    digits = frame_digits(count)
    index = 0
    async for png in frames:
        tarball.add_file(frame_name(index, digits), png, mtime=mtime)
        index += 1
    return tarball


async def render_to_tarball(
    animator: Animator,
    produce: Callable[[Animator], AsyncIterable[bytes]],
    *,
    mtime: Optional[int] = None,
) -> bytes:
    """Render ``animator`` through ``produce`` and return the finished archive.

    ``produce`` is the rendering pipeline: given the animator it yields one
    PNG byte string per entry of :func:`frame_times`.
    """
    load = getattr(animator, "load", None)
    if load is not None:
        await load()
    count = frame_count(animator.fps, animator.duration)
    tarball = await archive_frames(produce(animator), count, mtime=mtime)
    return tarball.generate()
