# materials/texture_loader.py
import logging
import os
from PIL import Image, UnidentifiedImageError
import numpy as np
from materials.textures import ImageTexture

logger = logging.getLogger(__name__)

def load_texture(image_path: str) -> ImageTexture:
    """
    Decode an image file into an ImageTexture. Palette, grayscale and
    alpha images are converted to plain RGB first.

    Raises:
        FileNotFoundError: If there is no file at `image_path`
        ValueError: If Pillow cannot decode the file
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            raster = np.array(img.convert('RGB') if img.mode != 'RGB' else img)
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Cannot decode texture {image_path}: {e}") from e

    logger.info("Loaded texture %s (%dx%d)", image_path, raster.shape[1], raster.shape[0])
    return ImageTexture(raster)

def create_image_material(image_path: str, material_class, **material_params):
    """Build `material_class` around the texture at `image_path`; extra keywords go to the material."""
    return material_class(load_texture(image_path), **material_params)
