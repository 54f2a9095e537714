"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

REPORT_TITLE = "Employee Attendance Report"
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 255
MAX_EMPLOYEE_ID_LENGTH = 100
EMPLOYEE_ID_PATTERN = r"^[A-Za-z0-9-]+$"
DATE_FORMAT = "%Y-%m-%d"
MISSING_VALUE = "N/A"

SAMPLE_RECORDS = (
    ("John Smith", "EMP001", "2024-01-15", "Present"),
    ("Sarah Johnson", "EMP002", "2024-01-15", "Present"),
    ("Mike Wilson", "EMP003", "2024-01-15", "Absent"),
)
