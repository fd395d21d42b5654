"""
ppm.py - Plain-text PPM (P3) encoder

Output layout:
    P3
    {width} {height}
    255
    one logical line of "R G B" triples per canvas row

No physical line may exceed the configured length (70 characters by
default, newline excluded). When a pixel does not fit, the row is split at
the best channel boundary:
    1. R and G stay on the current line, B starts the next one
    2. R stays on the current line, G and B start the next one
    3. the whole triple starts the next line

Project: rtkernel
"""

import logging

import numpy as np
from typing import List, Optional

from .colors import quantize
from .config import MAX_COLOR_VALUE, PPM_MAGIC, PpmConfig

logger = logging.getLogger(__name__)


class PpmEncoder:
    """
    Serializes a canvas to PPM text.

    Attributes
    ----------
    config : PpmConfig
        Encoder settings
    """

    def __init__(self, config: Optional[PpmConfig] = None):
        self.config = config if config is not None else PpmConfig()

    @staticmethod
    def header(width: int, height: int) -> str:
        """Three header lines: magic number, dimensions, max channel value."""
        return f"{PPM_MAGIC}\n{width} {height}\n{MAX_COLOR_VALUE}\n"

    def encode(self, canvas) -> str:
        """
        Encode a whole canvas.

        Parameters
        ----------
        canvas : Canvas
            Source image

        Returns
        -------
        str
            Header followed by one wrapped line group per canvas row
        """
        parts = [self.header(canvas.width, canvas.height)]
        if canvas.width > 0:
            for row in quantize(canvas.as_array()):
                parts.append(self.encode_row(row))

        ppm = "".join(parts)
        logger.debug(
            "Encoded %dx%d canvas as %d characters of PPM",
            canvas.width, canvas.height, len(ppm)
        )
        return ppm

    def encode_row(self, row: np.ndarray) -> str:
        """
        Encode one row of quantized pixels.

        Parameters
        ----------
        row : np.ndarray
            (width, 3) array of 8-bit channel values; width must be > 0

        Returns
        -------
        str
            Row text ending in a single newline, with no trailing spaces
        """
        limit = self.config.max_line_length
        chunks: List[str] = []
        line_length = 0

        for r, g, b in row.tolist():
            triple = f"{r} {g} {b} "
            if line_length + len(triple) <= limit:
                chunks.append(triple)
                line_length += len(triple)
                continue

            remaining = limit - line_length
            if len(f"{r} {g}\n") <= remaining:
                chunks.append(f"{r} {g}\n{b} ")
                line_length = len(f"{b} ")
            elif len(f"{r}\n") <= remaining:
                chunks.append(f"{r}\n{g} {b} ")
                line_length = len(f"{g} {b} ")
            else:
                # Every chunk ends with a separator space; turn it into the line break
                chunks[-1] = chunks[-1][:-1] + "\n"
                chunks.append(triple)
                line_length = len(triple)

        return "".join(chunks)[:-1] + "\n"
