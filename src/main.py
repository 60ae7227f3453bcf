# main.py
import argparse
import logging
import random
import sys
import time
from typing import List, Optional, Tuple
from PIL import Image
from tqdm import tqdm
import config
from core.vector import Vector3
from camera.camera import Camera
from geometry.world import HittableList
from geometry.sphere import Sphere
from geometry.plane import Plane
from geometry.mesh import MeshError, load_obj
from materials.lambertian import Lambertian
from materials.presets import ColorPresets, LightPresets, MetalPresets, TexturePresets
from materials.texture_loader import load_texture
from renderer.raytracer import Renderer

logger = logging.getLogger("pathtracer")

SCENES = ("spheres", "plane", "mesh")

def setup_logging(level: str = config.LOG_LEVEL):
    """Route every module logger to stderr with the configured format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=config.LOG_FORMAT,
        stream=sys.stderr,
    )

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    defaults = config.RENDER_SETTINGS
    parser = argparse.ArgumentParser(description="Offline Monte Carlo path tracer")
    parser.add_argument('--width', type=int, default=defaults['width'])
    parser.add_argument('--height', type=int, default=defaults['height'])
    parser.add_argument('--samples', type=int, default=None,
                        help="samples per pixel (overrides --quality)")
    parser.add_argument('--depth', type=int, default=None,
                        help="maximum path depth (overrides --quality)")
    parser.add_argument('--quality', choices=sorted(config.QUALITY_LEVELS), default=None)
    parser.add_argument('--workers', type=int, default=defaults['workers'])
    parser.add_argument('--seed', type=int, default=defaults['seed'])
    parser.add_argument('--scene', choices=SCENES, default=defaults['scene'])
    parser.add_argument('--mesh', default=None, help="OBJ file for the mesh scene")
    parser.add_argument('--texture', default=None, help="image texture for the center sphere")
    parser.add_argument('--output', default=defaults['output'])
    parser.add_argument('--no-bvh', dest='use_bvh', action='store_false', default=defaults['use_bvh'])
    parser.add_argument('--log-level', default=config.LOG_LEVEL)
    args = parser.parse_args(argv)

    quality = config.QUALITY_LEVELS.get(args.quality, {})
    if args.samples is None:
        args.samples = quality.get('samples', defaults['samples'])
    if args.depth is None:
        args.depth = quality.get('max_depth', defaults['max_depth'])
    if args.scene == 'mesh' and args.mesh is None:
        parser.error("--scene mesh requires --mesh PATH")
    return args

def create_world(scene: str = 'spheres', texture_path: Optional[str] = None,
                 mesh_path: Optional[str] = None, rng=None) -> Tuple[HittableList, Vector3]:
    """
    Build one of the demo scenes. Returns the world and its background color.

    Raises:
        FileNotFoundError, ValueError, MeshError: If a texture or mesh cannot be loaded
    """
    world = HittableList()
    background = ColorPresets.SKY

    center_albedo = load_texture(texture_path) if texture_path else ColorPresets.LAVENDER

    world.add(Sphere(Vector3(-0.21, -0.1, -1.0), 0.10, MetalPresets.silver()))
    world.add(Sphere(Vector3(0.0, -0.1, -1.0), 0.10, MetalPresets.gold()))
    world.add(Sphere(Vector3(0.21, -0.1, -1.0), 0.10, Lambertian(center_albedo)))

    if scene == 'spheres':
        world.add(Sphere(Vector3(0.0, -20.2, -1.0), 20.0, ColorPresets.matte(ColorPresets.PEACH)))
    else:
        ground = Lambertian(TexturePresets.checkerboard(scale=4.0))
        world.add(Plane(Vector3(1.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0),
                        Vector3(0.0, -0.2, 0.0), ground))
        world.add(Sphere(Vector3(0.0, 0.6, -1.0), 0.25, LightPresets.warm_light(4.0)))
        background = ColorPresets.SKY * 0.2

    if scene == 'mesh':
        mesh = load_obj(mesh_path, ColorPresets.matte(ColorPresets.RED),
                        offset=Vector3(*config.MESH_OFFSET), rng=rng)
        world.add(mesh)

    logger.info("Scene '%s' has %d objects", scene, len(world))
    return world, background

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    build_rng = random.Random(args.seed) if args.seed is not None else None
    try:
        world, background = create_world(args.scene, args.texture, args.mesh, rng=build_rng)
        if args.use_bvh:
            start = time.perf_counter()
            world.build_bvh(rng=build_rng)
            logger.info("BVH build took %.3fs", time.perf_counter() - start)

        settings = config.CAMERA_SETTINGS
        camera = Camera(
            position=Vector3(*settings['position']),
            lookat=Vector3(*settings['lookat']),
            fov=settings['fov'],
            image_width=args.width,
            image_height=args.height,
            background=background,
        )

        renderer = Renderer(camera, world, samples_per_pixel=args.samples, max_depth=args.depth,
                            workers=args.workers, seed=args.seed)
    except (MeshError, FileNotFoundError, ValueError) as e:
        logger.error("Scene setup failed: %s", e)
        return 1

    with tqdm(total=args.height, unit="row", desc="Rendering") as bar:
        renderer.progress_callback = lambda rows_done, total_rows: bar.update(1)
        pixels = renderer.render()
    Image.frombytes('RGB', (args.width, args.height), pixels).save(args.output)
    logger.info("Saved %s", args.output)
    return 0

if __name__ == "__main__":
    sys.exit(main())
