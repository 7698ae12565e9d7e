import logging
import os
from typing import TypedDict

from dotenv import load_dotenv

from hiring_hub.layout.initializer import setup_hiring_hub_layout
from hiring_hub.logging_config.logging_config import setup_logging
from hiring_hub.sheets.client import GoogleSheetsClient


class AppConfig(TypedDict):
    """Configuration for the layout setup"""

    SPREADSHEET_ID: str
    GOOGLE_CREDENTIALS: str


def load_config() -> AppConfig:
    """Load configuration from environment variables"""
    load_dotenv()

    required_vars = {
        "SPREADSHEET_ID": os.getenv("SPREADSHEET_ID"),
        "GOOGLE_CREDENTIALS": os.getenv("GOOGLE_CREDENTIALS"),
    }

    missing = [k for k, v in required_vars.items() if not v]
    if missing:
        raise OSError(f"Missing required environment variables: {', '.join(missing)}")

    return required_vars


# ruff: noqa: D103
def main() -> None:
    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("Starting Hiring Hub layout setup")

    config = load_config()
    sheets_client = GoogleSheetsClient(
        spreadsheet_id=config["SPREADSHEET_ID"],
        credentials_path=config["GOOGLE_CREDENTIALS"],
    )

    try:
        report = setup_hiring_hub_layout(sheets_client)
    except Exception:
        logger.exception("Layout setup failed; fix the cause and run it again")
        raise

    if report.changed_layout:
        logger.info(
            f"Layout updated: {len(report.appended_headers)} header(s) added, "
            f"{len(report.repaired_log_headers)} log header(s) written, "
            f"sheets created: {', '.join(report.created_sheets) or 'none'}"
        )
    else:
        logger.info("Layout already up to date; formats and validation re-applied")


if __name__ == "__main__":
    main()
