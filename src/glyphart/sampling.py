import logging
import math

import numpy as np

from glyphart.luma import round_half_up
from glyphart.model import PixelBuffer

logger = logging.getLogger(__name__)

# Terminal glyphs are roughly twice as tall as they are wide
GLYPH_ASPECT = 0.5


def grid_rows(width: int, height: int, target_columns: int) -> int:
    """Number of output rows that keeps the image's proportions for ``target_columns``."""
    return round_half_up(target_columns * (height / width) * GLYPH_ASPECT)


def sample_block(pixels: np.ndarray, x: int, y: int, w: int, h: int) -> np.ndarray:
    """Average colour of a pixel rectangle, clamped to the array bounds.

    Returns a uint8 array of 3 channels, each mean rounded half up.
    """
    block = pixels[y : y + h, x : x + w].reshape(-1, 3)
    mean = block.mean(axis=0, dtype=np.float64)
    return np.floor(mean + 0.5).astype(np.uint8)


def sample_grid(buffer: PixelBuffer, target_columns: int) -> tuple[int, np.ndarray]:
    """Box-filter a buffer down to a grid of cell colours.

    The grid is ``target_columns`` wide and as many rows tall as
    :func:`grid_rows` gives. Each cell averages a block of
    ``ceil(cell_width) x ceil(cell_height)`` pixels starting at the floor of
    its fractional origin, so neighbouring blocks may overlap by a pixel.

    Returns ``(rows, averages)`` where averages has shape (rows, cols, 3) as
    uint8. ``rows`` can be 0 for very wide images, giving an empty grid.
    """
    if target_columns <= 0:
        raise ValueError(f"target_columns must be positive, got {target_columns}")

    width, height = buffer.width, buffer.height
    rows = grid_rows(width, height, target_columns)
    averages = np.zeros((rows, target_columns, 3), dtype=np.uint8)
    if rows == 0:
        logger.debug("%dx%d image at %d columns gives no rows", width, height, target_columns)
        return rows, averages

    cell_width = width / target_columns
    cell_height = height / rows
    block_w = max(1, math.ceil(cell_width))
    block_h = max(1, math.ceil(cell_height))
    logger.debug(
        "Sampling %dx%d image into %dx%d cells of %.2fx%.2f px",
        width,
        height,
        target_columns,
        rows,
        cell_width,
        cell_height,
    )

    pixels = buffer.pixels
    for r in range(rows):
        y = math.floor(r * cell_height)
        for c in range(target_columns):
            x = math.floor(c * cell_width)
            averages[r, c] = sample_block(pixels, x, y, block_w, block_h)
    return rows, averages
