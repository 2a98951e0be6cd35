# renderer/canvas.py
import logging
import os
from pathlib import Path
from typing import Union
import numpy as np
from PIL import Image
from phongtracer.core.color import Color
from phongtracer.core.utils import EPSILON
from phongtracer.renderer import ppm

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class Canvas:
    """
    A rectangular grid of pixels.

    Pixels are addressed as canvas[x, y] with (0, 0) in the upper-left
    corner. The colors are stored by rows in a (height, width, 3) float
    array, so they are not clamped until the canvas gets encoded.
    """
    def __init__(self, width: int, height: int, color: Color = Color.BLACK):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}.")
        self.width = width
        self.height = height
        self.pixels = np.empty((height, width, 3), dtype=np.float64)
        self.fill(color)

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> "Canvas":
        """Creates a canvas from a (height, width, 3) array of float channels."""
        pixels = np.asarray(pixels, dtype=np.float64)
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(f"Expected a (height, width, 3) array, got shape {pixels.shape}.")
        canvas = cls(pixels.shape[1], pixels.shape[0])
        canvas.pixels[:] = pixels
        return canvas

    def fill(self, color: Color):
        self.pixels[:, :] = (color.red, color.green, color.blue)

    def _check_index(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Invalid index ({x},{y}) for a {self.width}x{self.height} canvas.")

    def __getitem__(self, index) -> Color:
        x, y = index
        self._check_index(x, y)
        r, g, b = self.pixels[y, x]
        return Color(r, g, b)

    def __setitem__(self, index, color: Color):
        x, y = index
        self._check_index(x, y)
        self.pixels[y, x] = (color.red, color.green, color.blue)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        if (self.width, self.height) != (other.width, other.height):
            return False
        return bool(np.all(np.abs(self.pixels - other.pixels) < EPSILON))

    __hash__ = None

    def to_array(self) -> np.ndarray:
        return self.pixels.copy()

    def to_ppm(self) -> str:
        return ppm.encode(self.pixels)

    @classmethod
    def from_ppm(cls, data: Union[str, bytes]) -> "Canvas":
        return cls.from_array(ppm.decode(data))

    def to_image(self) -> Image.Image:
        """Converts the canvas to an 8-bit RGB Pillow image."""
        return Image.fromarray(ppm.scale_channels(self.pixels).astype(np.uint8))

    def save(self, path: PathLike):
        """
        Writes the canvas to disk. A .ppm suffix selects the plain PPM
        encoder, any other suffix is handed to Pillow (e.g. .png).
        """
        path = Path(path)
        if path.suffix.lower() == ".ppm":
            path.write_text(self.to_ppm(), encoding="ascii")
        else:
            self.to_image().save(path)
        logger.debug("Saved %dx%d canvas to %s", self.width, self.height, path)

    @classmethod
    def load(cls, path: PathLike) -> "Canvas":
        """
        Reads a canvas from a .ppm file or any image format Pillow can open.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            PPMFormatError: If a .ppm file is malformed.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Image file not found: {path}")
        if path.suffix.lower() == ".ppm":
            return cls.from_ppm(path.read_bytes())
        with Image.open(path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            # Normalize to [0,1]
            return cls.from_array(np.array(img) / 255.0)

    def __repr__(self) -> str:
        return f"Canvas({self.width}, {self.height})"
