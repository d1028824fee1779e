from __future__ import annotations

import asyncio
import io
import tarfile
import unittest

from frametar.frames import (
    archive_frames,
    frame_count,
    frame_digits,
    frame_name,
    frame_times,
    render_to_tarball,
)
from frametar.writer import Tarball


MTIME = 1_700_000_000


class _FakeAnimator:
    def __init__(self, fps: float = 4, duration: float = 3, with_load: bool = True):
        self.width = 32
        self.height = 16
        self.fps = fps
        self.duration = duration
        self.loaded = False
        self.rendered = []
        if with_load:
            self.load = self._load

    async def _load(self):
        await asyncio.sleep(0)
        self.loaded = True

    def render(self, t, surface):
        self.rendered.append(t)
        surface.append(t)


async def _fake_pipeline(animator):
    # Stand-in for the paint + PNG encode step: one payload per frame time
    for t in frame_times(animator.fps, animator.duration):
        surface = []
        animator.render(t, surface)
        await asyncio.sleep(0)
        yield b"\x89PNG" + repr(surface).encode()


async def _iterate(items):
    for item in items:
        await asyncio.sleep(0)
        yield item


class FrameNamingTests(unittest.TestCase):
    def test_frame_count(self):
        self.assertEqual(frame_count(60, 2), 120)
        self.assertEqual(frame_count(24, 0.5), 12)
        self.assertEqual(frame_count(30, 0), 0)
        with self.assertRaises(ValueError):
            frame_count(0, 1)
        with self.assertRaises(ValueError):
            frame_count(30, -1)

    def test_frame_times(self):
        self.assertEqual(list(frame_times(4, 1)), [0.0, 0.25, 0.5, 0.75])
        self.assertEqual(len(list(frame_times(60, 2))), 120)

    def test_frame_digits(self):
        self.assertEqual(frame_digits(0), 1)
        self.assertEqual(frame_digits(9), 1)
        self.assertEqual(frame_digits(10), 2)
        self.assertEqual(frame_digits(100), 3)
        self.assertEqual(frame_digits(120), 3)

    def test_frame_name(self):
        self.assertEqual(frame_name(0, 3), "000.png")
        self.assertEqual(frame_name(119, 3), "119.png")
        self.assertEqual(frame_name(5, 1), "5.png")


class ArchiveFramesTests(unittest.TestCase):
    def test_frames_added_in_order(self):
        frames = [b"a", b"b", b"c"]
        t = asyncio.run(archive_frames(_iterate(frames), 3, mtime=MTIME))
        self.assertEqual([e.name for e in t.entries], ["0.png", "1.png", "2.png"])
        self.assertEqual([e.content for e in t.entries], frames)

    def test_appends_to_given_tarball(self):
        t = Tarball()
        t.add_file("readme.txt", b"frames follow", mtime=MTIME)
        out = asyncio.run(archive_frames(_iterate([b"x"] * 12), 12, tarball=t, mtime=MTIME))
        self.assertIs(out, t)
        self.assertEqual(t.entries[0].name, "readme.txt")
        self.assertEqual(t.entries[1].name, "00.png")
        self.assertEqual(t.entries[-1].name, "11.png")

    def test_partial_sequence_still_generates(self):
        async def broken():
            yield b"first"
            raise RuntimeError("decode failed")

        t = Tarball()
        with self.assertRaises(RuntimeError):
            asyncio.run(archive_frames(broken(), 10, tarball=t, mtime=MTIME))
        self.assertEqual([e.name for e in t.entries], ["00.png"])
        self.assertEqual(len(t.generate()), 512 + 512 + 1024)


class RenderToTarballTests(unittest.TestCase):
    def test_render_pipeline_to_archive(self):
        anim = _FakeAnimator(fps=4, duration=3)
        data = asyncio.run(render_to_tarball(anim, _fake_pipeline, mtime=MTIME))
        self.assertTrue(anim.loaded)
        self.assertEqual(len(anim.rendered), 12)
        with tarfile.open(fileobj=io.BytesIO(data), mode="r:") as tf:
            names = tf.getnames()
            self.assertEqual(names, [f"{i:02d}.png" for i in range(12)])
            first = tf.extractfile("00.png").read()
            self.assertTrue(first.startswith(b"\x89PNG"))

    def test_animator_without_load(self):
        anim = _FakeAnimator(fps=2, duration=1, with_load=False)
        data = asyncio.run(render_to_tarball(anim, _fake_pipeline, mtime=MTIME))
        self.assertFalse(anim.loaded)
        self.assertEqual(len(data), 2 * (512 + 512) + 1024)

    def test_no_frames_is_empty_archive(self):
        from frametar.errors import EmptyArchive

        anim = _FakeAnimator(fps=30, duration=0)
        with self.assertRaises(EmptyArchive):
            asyncio.run(render_to_tarball(anim, _fake_pipeline, mtime=MTIME))


if __name__ == "__main__":
    unittest.main()
