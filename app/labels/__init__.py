"""Labels module for barcode generation and badge sheets."""

from app.labels.router import router
from app.labels.service import LabelService

__all__ = ["router", "LabelService"]
