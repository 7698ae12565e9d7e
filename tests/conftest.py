from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from hiring_hub.sheets.models import NumberFormatType, SheetProperties


class FakeSheet:
    def __init__(self, properties: SheetProperties):
        self.properties = properties
        self.cells: Dict[Tuple[int, int], str] = {}
        self.validations: Dict[int, Tuple[int, int, Tuple[str, ...], bool]] = {}
        self.formats: Dict[int, Tuple[int, int, str, NumberFormatType]] = {}
        self.checkboxes: Dict[int, Tuple[int, int]] = {}
        self.frozen_rows = 0

    def row(self, row: int) -> List[str]:
        columns = [col for (r, col), value in self.cells.items() if r == row and value != ""]
        width = max(columns, default=0)
        return [self.cells.get((row, col), "") for col in range(1, width + 1)]


class FakeSheetsClient:
    """In-memory workbook exposing the same calls as GoogleSheetsClient"""

    def __init__(self, time_zone: str = "Etc/GMT", default_rows: int = 1000, default_columns: int = 26):
        self.time_zone = time_zone
        self.default_rows = default_rows
        self.default_columns = default_columns
        self.sheets: Dict[str, FakeSheet] = {}
        self.writes: List[Tuple[str, int, int, str]] = []
        self.added_sheets: List[str] = []
        self.flush_count = 0
        self._next_id = 0

    def add_existing_sheet(
        self,
        title: str,
        header: Sequence[str] = (),
        row_count: Optional[int] = None,
        column_count: Optional[int] = None,
    ) -> FakeSheet:
        properties = SheetProperties(
            sheet_id=self._next_id,
            title=title,
            row_count=self.default_rows if row_count is None else row_count,
            column_count=self.default_columns if column_count is None else column_count,
        )
        self._next_id += 1
        sheet = FakeSheet(properties)
        for column, value in enumerate(header, start=1):
            sheet.cells[(1, column)] = value
        self.sheets[title] = sheet
        return sheet

    def _sheet(self, properties: SheetProperties) -> FakeSheet:
        return self.sheets[properties.title]

    def get_time_zone(self) -> str:
        return self.time_zone

    def set_time_zone(self, time_zone: str) -> None:
        self.time_zone = time_zone

    def get_sheet(self, title: str) -> Optional[SheetProperties]:
        sheet = self.sheets.get(title)
        return sheet.properties if sheet else None

    def add_sheet(self, title: str) -> SheetProperties:
        self.added_sheets.append(title)
        return self.add_existing_sheet(title).properties

    def ensure_column_count(self, sheet: SheetProperties, column_count: int) -> None:
        if column_count > sheet.column_count:
            sheet.column_count = column_count

    def get_last_column(self, sheet: SheetProperties) -> int:
        columns = [col for (_, col), value in self._sheet(sheet).cells.items() if value != ""]
        return max(columns, default=0)

    def get_row(self, sheet: SheetProperties, row: int, num_columns: Optional[int] = None) -> List[str]:
        values = self._sheet(sheet).row(row)
        if num_columns is not None:
            values = values[:num_columns]
        width = max(num_columns or len(values), 1)
        return values + [""] * (width - len(values))

    def set_value(self, sheet: SheetProperties, row: int, column: int, value: str) -> None:
        assert column <= sheet.column_count, "write past the grid"
        self.writes.append((sheet.title, row, column, value))
        self._sheet(sheet).cells[(row, column)] = value

    def set_list_validation(self, sheet, start_row, column, num_rows, values, strict=True) -> None:
        self._sheet(sheet).validations[column] = (start_row, num_rows, tuple(values), strict)

    def set_number_format(self, sheet, start_row, column, num_rows, pattern, format_type) -> None:
        self._sheet(sheet).formats[column] = (start_row, num_rows, pattern, format_type)

    def insert_checkboxes(self, sheet, start_row, column, num_rows) -> None:
        self._sheet(sheet).checkboxes[column] = (start_row, num_rows)

    def set_frozen_rows(self, sheet, rows) -> None:
        self._sheet(sheet).frozen_rows = rows

    def flush(self) -> None:
        self.flush_count += 1


@pytest.fixture
def fake_client():
    return FakeSheetsClient()
