from .client import GoogleSheetsClient, SheetError
from .models import NumberFormatType, SheetProperties


__all__ = [
    "GoogleSheetsClient",
    "NumberFormatType",
    "SheetError",
    "SheetProperties",
]
