# hiring_hub/sheets/models.py
from dataclasses import dataclass
from enum import Enum


@dataclass
class SheetProperties:
    """Identity and grid size of a single tab in the workbook"""

    sheet_id: int
    title: str
    row_count: int
    column_count: int

    @classmethod
    def from_api(cls, properties: dict) -> "SheetProperties":
        grid = properties.get("gridProperties", {})
        return cls(
            sheet_id=properties["sheetId"],
            title=properties["title"],
            row_count=grid.get("rowCount", 0),
            column_count=grid.get("columnCount", 0),
        )


class NumberFormatType(Enum):
    """Number format types understood by the Sheets API"""

    DATE_TIME = "DATE_TIME"
    NUMBER = "NUMBER"
    TEXT = "TEXT"
