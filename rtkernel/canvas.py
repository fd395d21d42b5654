"""
canvas.py - Pixel grid that serializes to PPM

Project: rtkernel
"""

import logging

import numpy as np
from typing import Iterator, List, Optional

from .colors import Color
from .config import PpmConfig
from .ppm import PpmEncoder

logger = logging.getLogger(__name__)


class Canvas:
    """
    Fixed-size, row-major grid of colors.

    Attributes
    ----------
    width : int
        Number of columns (x ranges over 0 .. width - 1)
    height : int
        Number of rows (y ranges over 0 .. height - 1)

    Examples
    --------
    >>> canvas = Canvas(5, 3)
    >>> canvas.write_pixel(0, 0, Color(1.5, 0, 0))
    >>> canvas.to_ppm().splitlines()[3]
    '255 0 0 0 0 0 0 0 0 0 0 0 0 0 0'
    """

    def __init__(self, width: int, height: int, fill: Optional[Color] = None):
        """
        Initialize a canvas filled with one color.

        Parameters
        ----------
        width : int
            Number of columns
        height : int
            Number of rows
        fill : Color, optional
            Initial color of every pixel (default: black)
        """
        if width < 0 or height < 0:
            raise ValueError(f"Canvas size must be non-negative, got {width}x{height}")
        if fill is None:
            fill = Color(0.0, 0.0, 0.0)

        self.width = width
        self.height = height
        self._pixels = np.empty((height, width, 3), dtype=np.float64)
        self._pixels[:] = fill.data

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """
        Set one pixel. Coordinates outside the canvas are ignored.

        Parameters
        ----------
        x : int
            Column
        y : int
            Row
        color : Color
            New pixel color
        """
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return
        self._pixels[y, x] = color.data

    def read_pixel(self, x: int, y: int) -> Color:
        return Color.from_array(self._pixels[y, x])

    def pixels(self) -> Iterator[List[Color]]:
        """Yield each row, top to bottom, as a list of colors."""
        for row in self._pixels:
            yield [Color.from_array(value) for value in row]

    def as_array(self) -> np.ndarray:
        """Copy of the pixel data as a (height, width, 3) float array."""
        return self._pixels.copy()

    def to_ppm(self, config: Optional[PpmConfig] = None) -> str:
        """
        Encode as plain-text PPM (P3).

        Parameters
        ----------
        config : PpmConfig, optional
            Encoder settings (default: 70-character lines)

        Returns
        -------
        str
            Complete PPM document
        """
        return PpmEncoder(config).encode(self)

    def write_ppm(self, path, config: Optional[PpmConfig] = None) -> None:
        """Encode as PPM and write the text to ``path``."""
        ppm = self.to_ppm(config)
        with open(path, "w", encoding="ascii", newline="\n") as f:
            f.write(ppm)
        logger.info("Wrote %dx%d canvas to %s", self.width, self.height, path)

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"
