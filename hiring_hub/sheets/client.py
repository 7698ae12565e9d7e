import logging
from typing import List, Optional, Sequence

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .models import NumberFormatType, SheetProperties

logger = logging.getLogger(__name__)


class SheetError(Exception):
    """Custom exception for sheet-related errors"""

    pass


def column_letter(column: int) -> str:
    """Convert a 1-based column number to its A1 letters (1 -> A, 27 -> AA)"""
    if column < 1:
        raise ValueError(f"Column must be 1 or greater, got {column}")
    letters = ""
    while column:
        column, remainder = divmod(column - 1, 26)
        letters = chr(65 + remainder) + letters
    return letters


def quote_sheet_title(title: str) -> str:
    """Quote a sheet title for use in an A1 range"""
    return "'" + title.replace("'", "''") + "'"


class GoogleSheetsClient:
    """Handles all Google Sheets operations needed to lay out the workbook.

    Reads, the time zone, new sheets, grid growth and cell values go out
    immediately. Validation, formatting and freeze changes are queued and sent
    together by ``flush``.
    """

    SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

    def __init__(
        self,
        spreadsheet_id: str,
        credentials_path: str,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.credentials_path = credentials_path
        self.service = self._build_sheets_service()
        self._pending_requests: List[dict] = []

    def _build_sheets_service(self):
        """Create and return an authorized Sheets API service object"""
        try:
            creds = service_account.Credentials.from_service_account_file(
                self.credentials_path, scopes=self.SCOPES
            )
            return build("sheets", "v4", credentials=creds)
        except Exception as e:
            logger.error(f"Failed to build sheets service: {e}")
            raise SheetError(f"Could not initialize sheets service: {str(e)}") from e

    @property
    def pending_requests(self) -> List[dict]:
        return list(self._pending_requests)

    # Workbook

    def get_time_zone(self) -> str:
        """Get the spreadsheet time zone"""
        try:
            result = (
                self.service.spreadsheets()
                .get(spreadsheetId=self.spreadsheet_id, fields="properties.timeZone")
                .execute()
            )
            return result.get("properties", {}).get("timeZone", "")
        except HttpError as e:
            logger.error(f"Error reading time zone: {e}")
            raise SheetError(f"Failed to read spreadsheet time zone: {str(e)}") from e

    def set_time_zone(self, time_zone: str) -> None:
        self._batch_update(
            [
                {
                    "updateSpreadsheetProperties": {
                        "properties": {"timeZone": time_zone},
                        "fields": "timeZone",
                    }
                }
            ]
        )

    def get_sheet(self, title: str) -> Optional[SheetProperties]:
        """Find a sheet by its exact title"""
        try:
            result = (
                self.service.spreadsheets()
                .get(spreadsheetId=self.spreadsheet_id, fields="sheets.properties")
                .execute()
            )
        except HttpError as e:
            logger.error(f"Error listing sheets: {e}")
            raise SheetError(f"Failed to list sheets: {str(e)}") from e

        for sheet in result.get("sheets", []):
            properties = sheet.get("properties", {})
            if properties.get("title") == title:
                return SheetProperties.from_api(properties)
        return None

    def add_sheet(self, title: str) -> SheetProperties:
        """Create a new sheet and return its properties"""
        response = self._batch_update([{"addSheet": {"properties": {"title": title}}}])
        properties = response["replies"][0]["addSheet"]["properties"]
        return SheetProperties.from_api(properties)

    def ensure_column_count(self, sheet: SheetProperties, column_count: int) -> None:
        """Grow the sheet grid so that it has at least ``column_count`` columns"""
        missing = column_count - sheet.column_count
        if missing <= 0:
            return
        logger.info(f"Adding {missing} column(s) to {sheet.title}")
        self._batch_update(
            [
                {
                    "appendDimension": {
                        "sheetId": sheet.sheet_id,
                        "dimension": "COLUMNS",
                        "length": missing,
                    }
                }
            ]
        )
        sheet.column_count = column_count

    # Values

    def get_last_column(self, sheet: SheetProperties) -> int:
        """Get the last column holding a value in any row, 0 for an empty sheet"""
        range_name = quote_sheet_title(sheet.title)
        try:
            result = (
                self.service.spreadsheets()
                .values()
                .get(spreadsheetId=self.spreadsheet_id, range=range_name)
                .execute()
            )
        except HttpError as e:
            logger.error(f"Error reading {sheet.title}: {e}")
            raise SheetError(f"Failed to read {range_name}: {str(e)}") from e

        return max((len(row) for row in result.get("values", [])), default=0)

    def get_row(
        self, sheet: SheetProperties, row: int, num_columns: Optional[int] = None
    ) -> List[str]:
        """Read one row of cell values.

        With ``num_columns`` the read covers exactly that many cells starting at
        column A and the result is padded to that width. Without it the whole
        row is read; an empty row comes back as a single empty cell.
        """
        if num_columns is None:
            range_name = f"{quote_sheet_title(sheet.title)}!{row}:{row}"
        else:
            last_column = column_letter(max(num_columns, 1))
            range_name = f"{quote_sheet_title(sheet.title)}!A{row}:{last_column}{row}"

        try:
            result = (
                self.service.spreadsheets()
                .values()
                .get(spreadsheetId=self.spreadsheet_id, range=range_name)
                .execute()
            )
        except HttpError as e:
            logger.error(f"Error reading row {row} of {sheet.title}: {e}")
            raise SheetError(f"Failed to read {range_name}: {str(e)}") from e

        rows = result.get("values", [])
        values = list(rows[0]) if rows else []
        width = max(num_columns or len(values), 1)
        return values + [""] * (width - len(values))

    def set_value(self, sheet: SheetProperties, row: int, column: int, value: str) -> None:
        """Write a single cell value as entered"""
        range_name = f"{quote_sheet_title(sheet.title)}!{column_letter(column)}{row}"
        try:
            self.service.spreadsheets().values().update(
                spreadsheetId=self.spreadsheet_id,
                range=range_name,
                valueInputOption="RAW",
                body={"values": [[value]]},
            ).execute()
        except HttpError as e:
            logger.error(f"Error writing {range_name}: {e}")
            raise SheetError(f"Failed to write {range_name}: {str(e)}") from e

    # Queued formatting

    @staticmethod
    def _grid_range(
        sheet: SheetProperties, start_row: int, column: int, num_rows: int, num_columns: int = 1
    ) -> dict:
        """Build a GridRange from 1-based coordinates, never smaller than one cell"""
        num_rows = max(num_rows, 1)
        num_columns = max(num_columns, 1)
        return {
            "sheetId": sheet.sheet_id,
            "startRowIndex": start_row - 1,
            "endRowIndex": start_row - 1 + num_rows,
            "startColumnIndex": column - 1,
            "endColumnIndex": column - 1 + num_columns,
        }

    def set_list_validation(
        self,
        sheet: SheetProperties,
        start_row: int,
        column: int,
        num_rows: int,
        values: Sequence[str],
        strict: bool = True,
    ) -> None:
        """Restrict a column range to a dropdown of fixed values"""
        self._pending_requests.append(
            {
                "setDataValidation": {
                    "range": self._grid_range(sheet, start_row, column, num_rows),
                    "rule": {
                        "condition": {
                            "type": "ONE_OF_LIST",
                            "values": [{"userEnteredValue": value} for value in values],
                        },
                        "strict": strict,
                        "showCustomUi": True,
                    },
                }
            }
        )

    def set_number_format(
        self,
        sheet: SheetProperties,
        start_row: int,
        column: int,
        num_rows: int,
        pattern: str,
        format_type: NumberFormatType,
    ) -> None:
        self._pending_requests.append(
            {
                "repeatCell": {
                    "range": self._grid_range(sheet, start_row, column, num_rows),
                    "cell": {
                        "userEnteredFormat": {
                            "numberFormat": {"type": format_type.value, "pattern": pattern}
                        }
                    },
                    "fields": "userEnteredFormat.numberFormat",
                }
            }
        )

    def insert_checkboxes(
        self, sheet: SheetProperties, start_row: int, column: int, num_rows: int
    ) -> None:
        """Render a column range as checkboxes"""
        self._pending_requests.append(
            {
                "setDataValidation": {
                    "range": self._grid_range(sheet, start_row, column, num_rows),
                    "rule": {"condition": {"type": "BOOLEAN"}},
                }
            }
        )

    def set_frozen_rows(self, sheet: SheetProperties, rows: int) -> None:
        self._pending_requests.append(
            {
                "updateSheetProperties": {
                    "properties": {
                        "sheetId": sheet.sheet_id,
                        "gridProperties": {"frozenRowCount": rows},
                    },
                    "fields": "gridProperties.frozenRowCount",
                }
            }
        )

    def flush(self) -> None:
        """Send every queued request in a single batch update"""
        if not self._pending_requests:
            return
        requests = self._pending_requests
        logger.info(f"Applying {len(requests)} queued sheet update(s)")
        self._batch_update(requests)
        self._pending_requests = []

    def _batch_update(self, requests: List[dict]) -> dict:
        try:
            return (
                self.service.spreadsheets()
                .batchUpdate(spreadsheetId=self.spreadsheet_id, body={"requests": requests})
                .execute()
            )
        except HttpError as e:
            logger.error(f"Error applying batch update: {e}")
            raise SheetError(f"Failed to apply {len(requests)} sheet update(s): {str(e)}") from e
