import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..sheets.client import GoogleSheetsClient
from ..sheets.models import NumberFormatType, SheetProperties
from . import config
from .headers import build_header_map, normalize_header

logger = logging.getLogger(__name__)


@dataclass
class LayoutReport:
    """What a layout run changed or skipped"""

    time_zone_changed: bool = False
    created_sheets: List[str] = field(default_factory=list)
    appended_headers: List[Tuple[str, int]] = field(default_factory=list)
    repaired_log_headers: List[Tuple[int, str, str]] = field(default_factory=list)
    skipped_columns: List[str] = field(default_factory=list)

    @property
    def changed_layout(self) -> bool:
        return bool(
            self.time_zone_changed
            or self.created_sheets
            or self.appended_headers
            or self.repaired_log_headers
        )


def data_row_count(sheet: SheetProperties) -> int:
    """Number of rows below the header, never less than one"""
    return max(sheet.row_count - 1, 1)


class LayoutInitializer:
    """Brings a Hiring Hub workbook to its expected layout without losing data.

    Every step only patches what is missing, so running it again is safe and is
    the way to recover from a run that stopped part way.
    """

    def __init__(self, sheets_client: GoogleSheetsClient):
        self.sheets_client = sheets_client
        self.report = LayoutReport()

    def run(self) -> LayoutReport:
        """Run every layout step in order and flush the queued updates"""
        self.report = LayoutReport()
        self.ensure_time_zone()

        application_sheet = self.ensure_application_sheet()
        header_map = self.ensure_application_headers(application_sheet)
        self.ensure_pipeline_validation(application_sheet, header_map)
        self.format_application_columns(application_sheet, header_map)

        log_sheet = self.ensure_automation_log_sheet()
        self.ensure_log_headers_and_format(log_sheet)

        self.sheets_client.flush()
        return self.report

    def ensure_time_zone(self) -> None:
        current = self.sheets_client.get_time_zone()
        if current != config.TIME_ZONE:
            self.sheets_client.set_time_zone(config.TIME_ZONE)
            self.report.time_zone_changed = True
            logger.info(f"Spreadsheet time zone set to {config.TIME_ZONE} (was {current!r})")

    def ensure_application_sheet(self) -> SheetProperties:
        """Return the first existing application sheet, creating one if none exist"""
        for name in config.APPLICATION_SHEET_NAMES:
            existing = self.sheets_client.get_sheet(name)
            if existing:
                return existing

        name = config.APPLICATION_SHEET_NAMES[0]
        logger.info(f'No Application sheet found; creating "{name}".')
        self.report.created_sheets.append(name)
        return self.sheets_client.add_sheet(name)

    def ensure_application_headers(self, sheet: SheetProperties) -> Dict[str, int]:
        """Append any missing required headers after the last used column.

        Returns the normalized header -> column map, including the new headers.
        """
        # Any column holding data in any row counts as used, headed or not.
        # An empty sheet still reads as one blank cell, so new headers start at B.
        last_column = max(self.sheets_client.get_last_column(sheet), 1)
        header_row = self.sheets_client.get_row(sheet, 1, num_columns=last_column)
        header_map = build_header_map(header_row)

        for header in config.APPLICATION_NEW_HEADERS:
            key = normalize_header(header)
            if key in header_map:
                continue
            column = last_column + 1
            self.sheets_client.ensure_column_count(sheet, column)
            self.sheets_client.set_value(sheet, 1, column, header)
            header_map[key] = column
            last_column = column
            self.report.appended_headers.append((header, column))
            logger.info(f'Added header "{header}" to {sheet.title} column {column}')

        return header_map

    def _resolve_column(self, header_map: Dict[str, int], header: str) -> Optional[int]:
        column = header_map.get(normalize_header(header))
        if not column:
            self.report.skipped_columns.append(header)
            logger.debug(f'Column "{header}" not found; skipping')
        return column

    def ensure_pipeline_validation(
        self, sheet: SheetProperties, header_map: Dict[str, int]
    ) -> None:
        column = self._resolve_column(header_map, config.PIPELINE_PROGRESS_HEADER)
        if not column:
            logger.info("Pipeline Progress column not found; skipping validation.")
            return

        values = config.PIPELINE_VALUES + config.PIPELINE_INFO_VALUES
        self.sheets_client.set_list_validation(
            sheet, 2, column, data_row_count(sheet), values, strict=True
        )

    def format_application_columns(
        self, sheet: SheetProperties, header_map: Dict[str, int]
    ) -> None:
        """Apply date, count, checkbox and phone formats to the columns present"""
        num_rows = data_row_count(sheet)

        for header in config.DATE_TIME_COLUMNS:
            column = self._resolve_column(header_map, header)
            if column:
                self.sheets_client.set_number_format(
                    sheet, 2, column, num_rows, config.DATE_TIME_FORMAT, NumberFormatType.DATE_TIME
                )

        count_column = self._resolve_column(header_map, config.SEND_COUNT_COLUMN)
        if count_column:
            self.sheets_client.set_number_format(
                sheet, 2, count_column, num_rows, config.INTEGER_FORMAT, NumberFormatType.NUMBER
            )

        for header in config.CHECKBOX_COLUMNS:
            column = self._resolve_column(header_map, header)
            if column:
                self.sheets_client.insert_checkboxes(sheet, 2, column, num_rows)

        phone_column = self._resolve_column(header_map, config.PHONE_COLUMN)
        if phone_column:
            self.sheets_client.set_number_format(
                sheet, 2, phone_column, num_rows, config.PLAIN_TEXT_FORMAT, NumberFormatType.TEXT
            )
        else:
            logger.info(f"{config.PHONE_COLUMN} column not found; leaving phone numbers as is.")

    def ensure_automation_log_sheet(self) -> SheetProperties:
        sheet = self.sheets_client.get_sheet(config.AUTOMATION_LOG_SHEET)
        if not sheet:
            sheet = self.sheets_client.add_sheet(config.AUTOMATION_LOG_SHEET)
            self.report.created_sheets.append(config.AUTOMATION_LOG_SHEET)
            logger.info("Created Automation Log sheet.")
        return sheet

    def ensure_log_headers_and_format(self, sheet: SheetProperties) -> None:
        """Rewrite only the log header cells that drifted, then freeze and format"""
        expected = config.AUTOMATION_LOG_HEADERS
        self.sheets_client.ensure_column_count(sheet, len(expected))
        header_row = self.sheets_client.get_row(sheet, 1, num_columns=len(expected))

        written = 0
        for column, header in enumerate(expected, start=1):
            current = header_row[column - 1]
            if current != header:
                self.sheets_client.set_value(sheet, 1, column, header)
                self.report.repaired_log_headers.append((column, current, header))
                written += 1
                if current:
                    logger.info(f'Log header {column} changed from "{current}" to "{header}"')
        if written:
            logger.info(f"Wrote {written} header cell(s) on {sheet.title}")

        self.sheets_client.set_frozen_rows(sheet, 1)

        next_send_column = expected.index(config.LOG_NEXT_SEND_HEADER) + 1
        num_rows = data_row_count(sheet)
        for column in (1, next_send_column):
            self.sheets_client.set_number_format(
                sheet, 2, column, num_rows, config.DATE_TIME_FORMAT, NumberFormatType.DATE_TIME
            )


def setup_hiring_hub_layout(sheets_client: GoogleSheetsClient) -> LayoutReport:
    """Lay out the Hiring Hub workbook behind ``sheets_client``"""
    return LayoutInitializer(sheets_client).run()
