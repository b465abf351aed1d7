# renderer/scheduler.py
"""
Row-band parallel rendering.

The image is cut into one contiguous band of rows per worker. Every band owns
its own seeded random stream and writes only its own rows of the frame
buffers, so workers never contend for state while rendering.
"""
import os
import sys
import threading
from concurrent.futures import ThreadPoolExecutor, ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
import numpy as np
from pathtracer.renderer.framebuffer import FrameBuffers
from pathtracer.renderer.integrator import sample_pixel, sample_pixel_aux


@dataclass
class RenderContext:
    """Read-only scene state handed to every worker."""
    camera: object
    world: object
    settings: object


def default_worker_count() -> int:
    return os.cpu_count() or 1


def partition_rows(height: int, workers: int) -> List[Tuple[int, int]]:
    """
    Split rows [0, height) into `workers` contiguous [start, end) bands.
    The last band absorbs the remainder, so leading bands may be empty when
    there are more workers than rows.
    """
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    rows_per_band = height // workers
    bands = []
    for k in range(workers):
        start = k * rows_per_band
        end = height if k == workers - 1 else start + rows_per_band
        bands.append((start, end))
    return bands


def band_seeds(seed: int, count: int) -> List[np.random.SeedSequence]:
    """Independent, reproducible seed sequences, one per band index."""
    return np.random.SeedSequence(seed).spawn(count)


def render_band(context: RenderContext, start: int, end: int, seed: np.random.SeedSequence,
                out: Optional[FrameBuffers] = None,
                on_row: Optional[Callable[[int], None]] = None) -> FrameBuffers:
    """
    Render rows [start, end) with a random stream built from `seed`.

    Results go to `out` (a view onto the band's rows) or to freshly allocated
    buffers, which are returned either way.
    """
    settings = context.settings
    camera = context.camera
    world = context.world
    width = settings.width
    if out is None:
        out = FrameBuffers.allocate(width, end - start, settings.aux_buffers)
    rng = np.random.default_rng(seed)

    for row, j in enumerate(range(start, end)):
        base = row * width
        for i in range(width):
            if out.has_aux:
                color, albedo, normal, depth = sample_pixel_aux(i, j, camera, world, settings, rng)
                out.albedo[base + i] = (albedo.x, albedo.y, albedo.z)
                out.normal[base + i] = (normal.x, normal.y, normal.z)
                out.depth[base + i] = depth
            else:
                color = sample_pixel(i, j, camera, world, settings, rng)
            out.color[base + i] = (color.x, color.y, color.z)
        if on_row is not None:
            on_row(1)
    return out


class ProgressReporter:
    """
    Counts finished rows and prints a progress line every `every` rows and
    on the last row. The counter and the console each have their own lock.
    """
    def __init__(self, total_rows: int, enabled: bool = True, every: int = 10, stream=None):
        self.total_rows = total_rows
        self.enabled = enabled
        self.every = every
        self.stream = stream
        self.completed = 0
        self._count_lock = threading.Lock()
        self._console_lock = threading.Lock()

    def advance(self, rows: int = 1):
        with self._count_lock:
            before = self.completed
            self.completed += rows
            completed = self.completed
        if not self.enabled:
            return
        if completed // self.every > before // self.every or completed == self.total_rows:
            percent = completed / self.total_rows * 100.0
            with self._console_lock:
                print(f"\rProgress: {percent:.1f}% ({completed}/{self.total_rows})",
                      end="", file=self.stream or sys.stderr, flush=True)

    def finish(self):
        if not self.enabled:
            return
        with self._console_lock:
            print(f"\rProgress: 100.0% ({self.total_rows}/{self.total_rows}) - Done.           ",
                  file=self.stream or sys.stderr, flush=True)


class TileScheduler:
    """
    Runs render_band() over every row band and blocks until all of them are
    done.

    With the "thread" backend each worker writes straight into its rows of
    the shared buffers. With the "process" backend workers render into private
    buffers that the parent copies into the same rows as they complete.
    Progress then advances a whole band at a time, as each band finishes,
    rather than row by row.
    Either way the output depends only on the seed and the worker count.
    """
    def __init__(self, workers: Optional[int] = None, backend: str = "thread", progress: bool = True):
        self.workers = workers if workers is not None else default_worker_count()
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if backend not in ("thread", "process"):
            raise ValueError(f"Unknown backend {backend!r}")
        self.backend = backend
        self.progress = progress

    def run(self, context: RenderContext, buffers: FrameBuffers, seed: int):
        height = buffers.height
        seeds = band_seeds(seed, self.workers)
        jobs = [(start, end, seeds[k])
                for k, (start, end) in enumerate(partition_rows(height, self.workers))
                if end > start]
        reporter = ProgressReporter(height, enabled=self.progress)

        if self.backend == "thread":
            self._run_threads(context, buffers, jobs, reporter)
        else:
            self._run_processes(context, buffers, jobs, reporter)
        reporter.finish()

    def _run_threads(self, context, buffers, jobs, reporter):
        with ThreadPoolExecutor(max_workers=len(jobs)) as executor:
            futures = [executor.submit(render_band, context, start, end, seed,
                                       buffers.rows(start, end), reporter.advance)
                       for start, end, seed in jobs]
            for future in futures:
                future.result()

    def _run_processes(self, context, buffers, jobs, reporter):
        with ProcessPoolExecutor(max_workers=len(jobs)) as executor:
            futures = {executor.submit(render_band, context, start, end, seed): start
                       for start, end, seed in jobs}
            for future in as_completed(futures):
                band = future.result()
                buffers.write_rows(futures[future], band)
                reporter.advance(band.height)
