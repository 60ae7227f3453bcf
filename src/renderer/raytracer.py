# renderer/raytracer.py
import logging
import os
import random
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Tuple
from core.vector import Vector3
from .tone_mapping import to_rgb8

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]

def partition_rows(height: int, workers: int) -> List[Tuple[int, int]]:
    """
    Split rows [0, height) into at most `workers` contiguous (start, end)
    ranges whose sizes differ by at most one.
    """
    if height < 1 or workers < 1:
        raise ValueError(f"Need at least one row and one worker, got {height} rows, {workers} workers")
    count = min(workers, height)
    base, extra = divmod(height, count)
    ranges = []
    start = 0
    for i in range(count):
        end = start + base + (1 if i < extra else 0)
        ranges.append((start, end))
        start = end
    return ranges

class RenderProgress:
    """
    Completed-row counter shared by all workers. Each finished row bumps
    it once under a lock; the optional callback runs under the same lock,
    so it always sees increasing values.
    """
    def __init__(self, total_rows: int, callback: Optional[ProgressCallback] = None):
        self.total_rows = total_rows
        self.callback = callback
        self._rows_done = 0
        self._lock = threading.Lock()

    @property
    def rows_done(self) -> int:
        with self._lock:
            return self._rows_done

    def row_done(self) -> int:
        with self._lock:
            self._rows_done += 1
            if self.callback is not None:
                self.callback(self._rows_done, self.total_rows)
            return self._rows_done

class Renderer:
    """
    CPU path-tracing renderer. The image is cut into contiguous row ranges,
    one worker thread per range; the camera and world are shared read-only.

    Output is a flat row-major RGB byte buffer, 3 bytes per pixel. With a
    seed, every row draws from its own sampler derived from (seed, row),
    so the result does not depend on how rows are split across workers.
    """
    def __init__(self, camera, world, samples_per_pixel: int = 16, max_depth: int = 10,
                 workers: Optional[int] = None, seed: Optional[int] = None,
                 progress_callback: Optional[ProgressCallback] = None):
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
        if max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {max_depth}")
        if workers is None:
            workers = os.cpu_count() or 1
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.camera = camera
        self.world = world
        self.width = camera.image_width
        self.height = camera.image_height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.workers = workers
        self.seed = seed
        self.progress_callback = progress_callback

    def row_sampler(self, row: int) -> random.Random:
        if self.seed is None:
            return random.Random()
        # String seeds hash with SHA-512, independent of PYTHONHASHSEED.
        return random.Random(f"{self.seed}:{row}")

    def sample_pixel(self, x: int, y: int, rng) -> Vector3:
        """Average radiance of `samples_per_pixel` jittered paths through (x, y)."""
        color = Vector3(0.0, 0.0, 0.0)
        for _ in range(self.samples_per_pixel):
            ray = self.camera.get_ray(x, y, rng)
            color = color + self.camera.raycast(ray, self.world, self.max_depth, rng)
        return color / self.samples_per_pixel

    def render_rows(self, start: int, end: int, progress: Optional[RenderProgress] = None) -> bytes:
        """Render rows [start, end) into an image fragment."""
        fragment = bytearray()
        for y in range(start, end):
            rng = self.row_sampler(y)
            for x in range(self.width):
                fragment.extend(to_rgb8(self.sample_pixel(x, y, rng)))
            if progress is not None:
                progress.row_done()
        return bytes(fragment)

    def render(self) -> bytes:
        """
        Render the full image with one thread per row range and join them.
        Fragments are stitched in row order whatever order workers finish in;
        an exception in any worker is re-raised here.
        """
        ranges = partition_rows(self.height, self.workers)
        progress = RenderProgress(self.height, self.progress_callback)
        logger.info("Rendering %dx%d, %d spp, max depth %d, %d workers",
                    self.width, self.height, self.samples_per_pixel, self.max_depth, len(ranges))

        start_time = time.perf_counter()
        with ThreadPoolExecutor(max_workers=len(ranges), thread_name_prefix="render") as executor:
            futures = [executor.submit(self.render_rows, start, end, progress) for start, end in ranges]
            fragments = [future.result() for future in futures]
        elapsed = time.perf_counter() - start_time

        logger.info("Rendered %d rows in %.2fs", progress.rows_done, elapsed)
        return b"".join(fragments)

    def render_single_threaded(self) -> bytes:
        """Reference path: every row on the calling thread."""
        progress = RenderProgress(self.height, self.progress_callback)
        return self.render_rows(0, self.height, progress)
