"""Fixed layout of the Hiring Hub workbook."""

TIME_ZONE = "America/New_York"

APPLICATION_SHEET_NAMES = ("Application", "Applications")
APPLICATION_NEW_HEADERS = (
    "Stage Started At",
    "Sequence Send Count",
    "Last Send At",
    "Next Send At",
    "Completion Detected At",
    "Opt-Out",
    "Error",
    "Error Message",
)

PIPELINE_PROGRESS_HEADER = "Pipeline Progress"
PIPELINE_VALUES = (
    "Send Ideal Job Test",
    "Ideal Job Test – Waiting for Completion",
    "Ideal Job Test – Completed",
    "Invite to Interview",
    "Invited to Interview – Waiting for Booking",
    "Interview – Booked",
    "Closed – No Response",
    "Notified of Rejection – No Response",
)
# Statuses the office uses for record keeping only; the automation ignores them.
PIPELINE_INFO_VALUES = (
    "Pending Initial Review",
    "On Hold",
)

DATE_TIME_COLUMNS = (
    "Stage Started At",
    "Last Send At",
    "Next Send At",
    "Completion Detected At",
)
SEND_COUNT_COLUMN = "Sequence Send Count"
CHECKBOX_COLUMNS = ("Opt-Out", "Error")
PHONE_COLUMN = "Cell Phone Number"

AUTOMATION_LOG_SHEET = "Automation Log"
AUTOMATION_LOG_HEADERS = (
    "Logged At",
    "Email Address",
    "First Name",
    "Last Name",
    "Pipeline Stage",
    "Sequence",
    "Channel",
    "Attempt Number",
    "Template ID",
    "Provider Message ID",
    "Result",
    "Result Detail",
    "Next Send At",
)
LOG_NEXT_SEND_HEADER = "Next Send At"

DATE_TIME_FORMAT = "m/d/yyyy h:mm AM/PM"
INTEGER_FORMAT = "0"
PLAIN_TEXT_FORMAT = "@"
