"""Barcode symbol rendering."""

import io
import logging
from dataclasses import dataclass

import barcode
from barcode.writer import ImageWriter, SVGWriter
from PIL import Image, ImageOps

from app.labels.exceptions import BarcodeGenerationError, InvalidBarcodeTextError
from app.labels.formatting import is_valid_barcode_text

logger = logging.getLogger(__name__)

MM_PER_INCH = 25.4
RENDER_DPI = 300

# Accepted request values; the settings defaults use the same bounds
SCALE_RANGE = (1, 10)
HEIGHT_RANGE = (4, 60)

SYMBOLOGIES = ("code128", "code39")

MEDIA_TYPES = {
    "png": "image/png",
    "svg": "image/svg+xml",
}


@dataclass(frozen=True)
class BarcodeImage:
    """Encoded barcode ready to be served."""

    content: bytes
    media_type: str


def _writer_options(scale: int, height: int) -> dict:
    # scale is pixels per module at RENDER_DPI; python-barcode wants mm
    return {
        "module_width": scale * MM_PER_INCH / RENDER_DPI,
        "module_height": float(height),
        "quiet_zone": 0,
        "margin_top": 0,
        "margin_bottom": 0,
        "write_text": False,
        "background": "white",
        "foreground": "black",
        "dpi": RENDER_DPI,
    }


def render_barcode(
    text: str,
    symbology: str = "code128",
    scale: int = 3,
    height: int = 12,
    image_format: str = "png",
) -> BarcodeImage:
    """Render a numeric value as a barcode image.

    The symbol has no human-readable text, a white background and no quiet
    zone; the label layout supplies its own spacing.

    Args:
        text: Digits to encode. Leading/trailing whitespace is ignored.
        symbology: ``code128`` or ``code39``.
        scale: Width of one module in pixels at 300 dpi.
        height: Bar height in millimetres.
        image_format: ``png`` or ``svg``.

    Returns:
        BarcodeImage: Encoded image bytes and media type.

    Raises:
        InvalidBarcodeTextError: If the text is empty or not digits only.
        BarcodeGenerationError: If the barcode library fails.
    """
    text = text.strip()
    if not is_valid_barcode_text(text):
        raise InvalidBarcodeTextError(text)
    if symbology not in SYMBOLOGIES:
        raise BarcodeGenerationError(f"unsupported symbology {symbology!r}")
    if image_format not in MEDIA_TYPES:
        raise BarcodeGenerationError(f"unsupported format {image_format!r}")

    writer = ImageWriter() if image_format == "png" else SVGWriter()
    kwargs = {"add_checksum": False} if symbology == "code39" else {}

    try:
        symbol = barcode.get_barcode_class(symbology)(text, writer=writer, **kwargs)
        buffer = io.BytesIO()
        symbol.write(buffer, options=_writer_options(scale, height))
        content = buffer.getvalue()
        if image_format == "png":
            content = _trim_to_bars(content)
    except Exception as e:
        logger.warning("Barcode generation failed for %r: %s", text, e)
        raise BarcodeGenerationError(str(e) or "unknown error") from e

    return BarcodeImage(content=content, media_type=MEDIA_TYPES[image_format])


def _trim_to_bars(png: bytes) -> bytes:
    """Crop any white border the writer leaves around the bars."""
    with Image.open(io.BytesIO(png)) as image:
        bars = image.convert("L")
    box = ImageOps.invert(bars).getbbox()
    if box and box != (0, 0, bars.width, bars.height):
        bars = bars.crop(box)
    out = io.BytesIO()
    bars.save(out, format="PNG", dpi=(RENDER_DPI, RENDER_DPI))
    return out.getvalue()
