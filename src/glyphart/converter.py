import logging
from pathlib import Path

import numpy as np
from PIL import Image

from glyphart.charsets import DEFAULT_CHARSET, Charset, lookup
from glyphart.luma import map_to_glyph
from glyphart.model import Cell, ConversionConfig, ConversionResult, PixelBuffer
from glyphart.sampling import sample_grid

logger = logging.getLogger(__name__)

ANSI_RESET = "\033[0m"


def assemble(cell_averages: np.ndarray, charset: Charset, config: ConversionConfig) -> ConversionResult:
    """Turn a (rows, cols, 3) grid of cell colours into a result of glyph cells."""
    rows = []
    for row in cell_averages:
        cells = []
        for avg in row:
            color = (int(avg[0]), int(avg[1]), int(avg[2]))
            index, _ = map_to_glyph(color, charset, config.invert_brightness)
            cells.append(Cell(charset[index], color if config.color_mode else None))
        rows.append(tuple(cells))
    return ConversionResult(rows=tuple(rows), color_mode=config.color_mode)


def convert(buffer: PixelBuffer, config: ConversionConfig) -> ConversionResult:
    if not isinstance(buffer, PixelBuffer):
        raise TypeError(f"Expected a PixelBuffer, got {type(buffer).__name__}")
    charset = lookup(config.charset_id)
    _, averages = sample_grid(buffer, config.target_columns)
    return assemble(averages, charset, config)


def to_plain_text(result: ConversionResult) -> str:
    """Glyphs only, rows separated by newlines. Colour information is ignored."""
    return "\n".join(result.lines)


def to_ansi(result: ConversionResult) -> str:
    """Wrap each glyph of a colour result in an ANSI truecolor foreground escape."""
    if not result.color_mode:
        return to_plain_text(result)
    out = []
    for row in result.rows:
        parts = []
        for cell in row:
            r, g, b = cell.color
            parts.append(f"\033[38;2;{r};{g};{b}m{cell.glyph}")
        parts.append(ANSI_RESET)
        out.append("".join(parts))
    return "\n".join(out)


def image_to_text(
    image: Image.Image | str | Path,
    columns: int,
    charset_id: str = DEFAULT_CHARSET,
    colour: bool = False,
    invert: bool = False,
) -> str:
    """Convert a Pillow image or image file to glyph art.

    Returns ANSI-coloured text when ``colour`` is set, plain text otherwise.
    """
    config = ConversionConfig(
        target_columns=columns,
        charset_id=charset_id,
        color_mode=colour,
        invert_brightness=invert,
    )
    if isinstance(image, Image.Image):
        buffer = PixelBuffer.from_image(image)
    else:
        with Image.open(image) as opened:
            buffer = PixelBuffer.from_image(opened)
    result = convert(buffer, config)
    logger.debug(
        "Converted %dx%d image into %d rows of %d columns", buffer.width, buffer.height, result.row_count, columns
    )
    return to_ansi(result) if colour else to_plain_text(result)
