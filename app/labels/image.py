"""Downloadable PNG label card."""

import io

from PIL import Image, ImageDraw, ImageFont

from app.labels.schemas import LabelContent

CARD_WIDTH = 900
CARD_HEIGHT = 600
PADDING = 48
BARCODE_WIDTH = 760


def _font(size: int, bold: bool = False) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    name = "DejaVuSans-Bold.ttf" if bold else "DejaVuSans.ttf"
    try:
        return ImageFont.truetype(name, size)
    except OSError:
        return ImageFont.load_default(size)


def _centered_text(draw: ImageDraw.ImageDraw, y: int, text: str, font, fill: str) -> int:
    """Draw a horizontally centred line and return the y below it."""
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    draw.text(((CARD_WIDTH - (right - left)) // 2, y), text, fill=fill, font=font)
    return y + (bottom - top)


def render_label_card(content: LabelContent, barcode_png: bytes) -> bytes:
    """Compose a 900x600 label card with caption, name, number and barcode.

    Args:
        content: Formatted label text.
        barcode_png: PNG bytes of the barcode symbol.

    Returns:
        bytes: PNG image.
    """
    card = Image.new("RGB", (CARD_WIDTH, CARD_HEIGHT), "white")
    draw = ImageDraw.Draw(card)

    y = PADDING
    y = _centered_text(draw, y, "E M P L O Y E E", _font(18), "#6b7280") + 12
    y = _centered_text(draw, y, content.name, _font(44, bold=True), "#111827") + 12
    _centered_text(draw, y, content.barcode_value, _font(26), "#374151")

    with Image.open(io.BytesIO(barcode_png)) as symbol:
        ratio = BARCODE_WIDTH / symbol.width
        height = max(1, int(symbol.height * ratio))
        max_height = CARD_HEIGHT // 2 - PADDING
        if height > max_height:
            height = max_height
        resized = symbol.convert("RGB").resize((BARCODE_WIDTH, height), Image.Resampling.NEAREST)
    card.paste(resized, ((CARD_WIDTH - BARCODE_WIDTH) // 2, CARD_HEIGHT - PADDING - height))

    out = io.BytesIO()
    card.save(out, format="PNG")
    return out.getvalue()
