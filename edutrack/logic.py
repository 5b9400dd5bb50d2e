import logging
import re
import time
from datetime import date, datetime

from edutrack.constants import (
    STUDENTS_STORAGE_KEY,
    ATTENDANCE_STORAGE_KEY,
    DEFAULT_STUDENTS,
    ROLL_NO_WIDTH,
    PRESENT,
    ABSENT,
    STATUSES,
)
from edutrack.models import Student, StudentStats, DayCounts
from edutrack.storage import load_data, save_data

logger = logging.getLogger(__name__)


def percent(part, whole):
    """Whole-number percentage rounded half up, 0 when ``whole`` is 0."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


# ==================================================
# Dates
# ==================================================

def format_date(value):
    return value.strftime("%Y-%m-%d")


def format_display_date(value):
    return f"{value.strftime('%A, %B')} {value.day}, {value.year}"


def parse_date(text):
    try:
        return datetime.strptime(text.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        return None


def today_str():
    return format_date(date.today())


# ==================================================
# Roster
# ==================================================

def get_students():
    raw = load_data(STUDENTS_STORAGE_KEY, DEFAULT_STUDENTS)
    return [Student.from_dict(s) for s in raw if isinstance(s, dict)]


def save_students(students):
    return save_data(STUDENTS_STORAGE_KEY, [s.to_dict() for s in students])


def natural_key(text):
    return [
        int(part) if part.isdecimal() else part.lower()
        for part in re.split(r"(\d+)", text)
    ]


def sort_students(students, by="roll_no"):
    if by == "name":
        return sorted(students, key=lambda s: (s.name.lower(), natural_key(s.roll_no)))
    return sorted(students, key=lambda s: (natural_key(s.roll_no), s.name.lower()))


def next_roll_no(students):
    numbers = [int(s.roll_no) for s in students if s.roll_no.isdecimal()]
    next_number = max(numbers) + 1 if numbers else len(students) + 1
    return str(next_number).zfill(ROLL_NO_WIDTH)


def _new_student_id(students):
    existing_ids = {s.id for s in students}
    candidate = int(time.time() * 1000)
    while str(candidate) in existing_ids:
        candidate += 1
    return str(candidate)


def add_student(name, roll_no=""):
    name = (name or "").strip()
    roll_no = (roll_no or "").strip()

    if not name:
        return False, "Please enter the student's name.", None

    students = get_students()

    for student in students:
        if student.name.strip().lower() == name.lower():
            return False, f"A student named {name} already exists.", None

    if not roll_no:
        roll_no = next_roll_no(students)

    for student in students:
        if student.roll_no.strip() == roll_no:
            return False, f"Roll number {roll_no} is already assigned to {student.name}.", None

    new_student = Student(id=_new_student_id(students), roll_no=roll_no, name=name)
    students.append(new_student)
    save_students(students)

    logger.info("Added student %s (roll no %s)", name, roll_no)
    return True, f"{name} was added with roll number {roll_no}.", new_student


# ==================================================
# Attendance record
# ==================================================

def get_attendance_data():
    data = load_data(ATTENDANCE_STORAGE_KEY, {})
    return {
        day: statuses
        for day, statuses in data.items()
        if isinstance(statuses, dict)
    }


def save_attendance_data(data):
    return save_data(ATTENDANCE_STORAGE_KEY, data)


def get_attendance_for_date(day):
    return dict(get_attendance_data().get(day, {}))


def update_attendance(student_id, day, status):
    if status not in STATUSES:
        raise ValueError(f"Unknown attendance status: {status!r}")

    data = get_attendance_data()
    if day not in data:
        data[day] = {}
    data[day][student_id] = status
    save_attendance_data(data)


def get_attendance_stats(students=None, data=None):
    if students is None:
        students = get_students()
    if data is None:
        data = get_attendance_data()

    stats = {s.id: StudentStats() for s in students}

    for statuses in data.values():
        for student_id, status in statuses.items():
            if student_id not in stats:
                continue
            stats[student_id].total += 1
            if status == PRESENT:
                stats[student_id].present += 1

    for student_stats in stats.values():
        student_stats.percentage = percent(student_stats.present, student_stats.total)

    return stats


# ==================================================
# Dashboard
# ==================================================

def toggle_status(student_id, day, present):
    status = PRESENT if present else ABSENT
    update_attendance(student_id, day, status)
    return status


def day_counts(statuses, students):
    roster_ids = {s.id for s in students}
    recorded = [status for student_id, status in statuses.items() if student_id in roster_ids]

    present = sum(1 for status in recorded if status == PRESENT)
    absent = sum(1 for status in recorded if status == ABSENT)
    marked = present + absent

    return DayCounts(
        total_students=len(students),
        present=present,
        absent=absent,
        marked=marked,
        unmarked=len(students) - marked,
        rate=percent(present, marked),
    )


def is_day_complete(day, students, statuses=None):
    if statuses is None:
        statuses = get_attendance_for_date(day)
    return all(s.id in statuses for s in students)


def can_submit(day, students, today=None):
    today = today or today_str()

    if day < today:
        return False, "Cannot submit attendance for a past date."

    if not students:
        return False, "There are no students to submit attendance for."

    if day == today and is_day_complete(day, students):
        return False, "Attendance for today has already been submitted."

    return True, ""


def submit_attendance(day, students, today=None):
    ok, message = can_submit(day, students, today=today)
    if not ok:
        return False, message, 0

    data = get_attendance_data()
    statuses = data.setdefault(day, {})

    changed = 0
    for student in students:
        if student.id not in statuses:
            statuses[student.id] = ABSENT
            changed += 1

    if changed:
        save_attendance_data(data)

    logger.info("Submitted attendance for %s, %d unmarked set to Absent", day, changed)

    if changed:
        return True, f"Attendance submitted. {changed} unmarked student(s) marked Absent.", changed
    return True, "Attendance submitted.", changed
