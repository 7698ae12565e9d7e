"""Hiring Hub - layout setup for the Busy Bees hiring tracker.

This package prepares the Google Sheets workbook that tracks job applicants:
it adds the automation columns, the pipeline stage dropdown, cell formats and
the Automation Log sheet.
"""

__version__ = "0.1.0"

from .layout.initializer import LayoutInitializer, LayoutReport, setup_hiring_hub_layout
from .sheets.client import GoogleSheetsClient, SheetError


__all__ = [
    "GoogleSheetsClient",
    "LayoutInitializer",
    "LayoutReport",
    "SheetError",
    "setup_hiring_hub_layout",
]
