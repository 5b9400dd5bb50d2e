import os

APP_NAME = "EduTrack"
APP_SUBTITLE = "Student Attendance Management"
APP_VERSION = "1.0"

PROGRAM_STORAGE = os.environ.get("EDUTRACK_DATA", "data")
STUDENTS_STORAGE_KEY = "school-students-data"
ATTENDANCE_STORAGE_KEY = "school-attendance-data"
LOGO_FILE = "edutrack_logo.png"

LOG_LEVEL = os.environ.get("EDUTRACK_LOG_LEVEL", "INFO")

PRESENT = "Present"
ABSENT = "Absent"
STATUSES = (PRESENT, ABSENT)

DEFAULT_STUDENTS = [
    {"id": "1", "rollNo": "001", "name": "Alice Johnson"},
    {"id": "2", "rollNo": "002", "name": "Bob Smith"},
    {"id": "3", "rollNo": "003", "name": "Charlie Brown"},
    {"id": "4", "rollNo": "004", "name": "Diana Ross"},
    {"id": "5", "rollNo": "005", "name": "Edward Wilson"},
]
ROLL_NO_WIDTH = 3

DEMO_EMAIL = "admin@school.com"
DEMO_PASSWORD = "123456"
LOGIN_DELAY_MS = 1000

EXCELLENT_THRESHOLD = 90
GOOD_THRESHOLD = 75
AVERAGE_THRESHOLD = 60

TREND_MAX_DAYS = 30
CHART_WIDTH = 760
CHART_HEIGHT = 180

WINDOW_WIDTH = 900
WINDOW_HEIGHT = 650
DEFAULT_FONT = ("Arial", 10)
TITLE_FONT = ("Arial", 18, "bold")
CARD_FONT = ("Arial", 20, "bold")

COLOR_PRIMARY = "#3498db"
COLOR_TEXT = "#2c3e50"
COLOR_MUTED = "#7f8c8d"
COLOR_PANEL = "#ecf0f1"
COLOR_SUCCESS = "#27ae60"
COLOR_WARNING = "#f39c12"
COLOR_DANGER = "#e74c3c"
