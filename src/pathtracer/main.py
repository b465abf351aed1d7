# main.py
import argparse
import time
import numpy as np
from pathtracer.renderer.raytracer import Renderer
from pathtracer.renderer.settings import QUALITY_LEVELS, BACKENDS, RenderSettings
from pathtracer.renderer.tone_mapping import write_png
from pathtracer.scenes import SCENES


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Render a sphere scene with a Monte Carlo path tracer.")
    p.add_argument("--scene", choices=sorted(SCENES), default="three_spheres")
    p.add_argument("--width", type=int, default=400)
    p.add_argument("--aspect", type=float, default=16.0 / 9.0, help="width / height")
    p.add_argument("--quality", choices=sorted(QUALITY_LEVELS),
                   help="sample/bounce preset; --samples and --depth override it")
    p.add_argument("--samples", type=int, help="samples per pixel")
    p.add_argument("--depth", type=int, help="maximum bounces per path")
    p.add_argument("--workers", type=int, help="row bands rendered in parallel (default: CPU count)")
    p.add_argument("--backend", choices=BACKENDS, default="process")
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--exposure", type=float, help="sky brightness; scenes pick their own by default")
    p.add_argument("--aux", action="store_true", help="also compute albedo/normal/depth passes")
    p.add_argument("--quiet", action="store_true", help="no progress output")
    p.add_argument("--output", default="image.png")
    return p.parse_args(argv)


def build_renderer(args) -> Renderer:
    settings = RenderSettings.from_aspect(
        args.width, args.aspect,
        seed=args.seed,
        workers=args.workers,
        backend=args.backend,
        aux_buffers=args.aux,
        progress=not args.quiet,
    )
    if args.quality is not None:
        settings = settings.with_quality(args.quality)
    if args.samples is not None:
        settings.samples_per_pixel = args.samples
    if args.depth is not None:
        settings.max_depth = args.depth

    renderer = Renderer(settings)
    SCENES[args.scene](renderer, np.random.default_rng(args.seed))
    if args.exposure is not None:
        settings.exposure = args.exposure
    return renderer


def main(argv=None) -> int:
    args = parse_args(argv)
    renderer = build_renderer(args)
    s = renderer.settings
    renderer.initialize()

    print(f"Rendering {args.scene} at {s.width}x{s.height}, "
          f"{s.samples_per_pixel} spp, {s.max_depth} bounces ({s.backend} backend)")
    start = time.perf_counter()
    renderer.render()
    print(f"Render time: {time.perf_counter() - start:.2f}s")

    path = write_png(renderer.frame, s.width, s.height, args.output)
    print(f"Saved {path}")

    if s.aux_buffers:
        aux_path = path.with_suffix(".aux.npz")
        np.savez(aux_path,
                 albedo=renderer.albedo.reshape(s.height, s.width, 3),
                 normal=renderer.normal.reshape(s.height, s.width, 3),
                 depth=renderer.depth.reshape(s.height, s.width))
        print(f"Saved {aux_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
