"""Barcode and label API routes."""

import math
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.responses import PlainTextResponse

from app.dependencies import AppSettings, DbSession
from app.labels.barcodes import HEIGHT_RANGE, SCALE_RANGE, render_barcode
from app.labels.exceptions import (
    BarcodeGenerationError,
    EmployeeNotFoundError,
    InvalidBarcodeTextError,
)
from app.labels.schemas import LabelSheet
from app.labels.service import LabelService, get_label_service

router = APIRouter()

NO_STORE = {"Cache-Control": "no-store"}


def get_service(db: DbSession, settings: AppSettings) -> LabelService:
    """Get label service dependency."""
    return get_label_service(db, settings)


def _dimension(raw: str | None, default: int, bounds: tuple[int, int]) -> int:
    """Parse a numeric query value, rounded and clamped to ``bounds``.

    Missing or non-numeric input gives ``default``.
    """
    try:
        value = float(raw) if raw is not None else float(default)
    except ValueError:
        value = float(default)
    if not math.isfinite(value):
        value = float(default)
    low, high = bounds
    return min(high, max(low, round(value)))


@router.get("/barcode")
async def get_barcode(
    settings: AppSettings,
    text: str = Query(""),
    scale: str | None = Query(None),
    height: str | None = Query(None),
    image_format: str = Query("png", alias="format", pattern="^(png|svg)$"),
):
    """Render a numeric value as a barcode image.

    Args:
        text: Digits to encode.
        scale: Pixels per module, rounded and clamped to 1-10. Non-numeric
            values fall back to the configured default.
        height: Bar height in mm, rounded and clamped to 4-60.
        image_format: ``png`` or ``svg``.

    Returns:
        Response: The image, never cached.
    """
    try:
        image = render_barcode(
            text,
            symbology=settings.barcode_symbology,
            scale=_dimension(scale, settings.barcode_scale, SCALE_RANGE),
            height=_dimension(height, settings.barcode_height, HEIGHT_RANGE),
            image_format=image_format,
        )
    except InvalidBarcodeTextError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)
    except BarcodeGenerationError as e:
        return PlainTextResponse(
            f"Barcode generation failed: {e}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return Response(content=image.content, media_type=image.media_type, headers=NO_STORE)


@router.get("/label")
async def get_label_card(
    service: Annotated[LabelService, Depends(get_service)],
    employee_id: str = Query("", alias="id"),
):
    """Download a single label as a PNG card."""
    employee_id = employee_id.strip()
    if not employee_id:
        return PlainTextResponse("Missing employee id.", status_code=status.HTTP_400_BAD_REQUEST)
    try:
        card = service.label_card(employee_id)
    except EmployeeNotFoundError:
        return PlainTextResponse("Employee not found.", status_code=status.HTTP_404_NOT_FOUND)
    except (BarcodeGenerationError, InvalidBarcodeTextError):
        return PlainTextResponse(
            "Unable to generate barcode.",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return Response(
        content=card.content,
        media_type="image/png",
        headers={**NO_STORE, "Content-Disposition": f'inline; filename="{card.filename}"'},
    )


@router.get("/labels/sheet", response_model=LabelSheet)
async def get_label_sheet(
    service: Annotated[LabelService, Depends(get_service)],
    employee_id: str | None = Query(None, alias="id"),
    count: str | None = Query(None),
    ids: str | None = Query(None),
):
    """Return the laid-out sheet that the print page would render."""
    try:
        return service.sheet_from_params(employee_id, count, ids)
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
