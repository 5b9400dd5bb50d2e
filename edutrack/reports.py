"""
Aggregate views over the attendance record for the reports screen.
"""
from dataclasses import dataclass

import pandas as pd

from edutrack.constants import (
    PRESENT,
    ABSENT,
    EXCELLENT_THRESHOLD,
    GOOD_THRESHOLD,
    AVERAGE_THRESHOLD,
    COLOR_SUCCESS,
    COLOR_WARNING,
    COLOR_DANGER,
)
from edutrack.logic import (
    get_students,
    get_attendance_data,
    get_attendance_stats,
    percent,
    sort_students,
    natural_key,
)
from edutrack.models import DaySummary

PERFORMANCE_COLUMNS = ["roll_no", "name", "present", "total", "percentage", "performance"]


@dataclass
class Report:
    tracked_days: int
    average_attendance: int
    student_count: int
    table: pd.DataFrame
    trend: list

    @property
    def is_empty(self):
        return self.tracked_days == 0


def performance_label(percentage):
    if percentage >= EXCELLENT_THRESHOLD:
        return "Excellent"
    if percentage >= GOOD_THRESHOLD:
        return "Good"
    if percentage >= AVERAGE_THRESHOLD:
        return "Average"
    return "Poor"


def performance_color(percentage):
    if percentage >= EXCELLENT_THRESHOLD:
        return COLOR_SUCCESS
    if percentage >= GOOD_THRESHOLD:
        return COLOR_WARNING
    return COLOR_DANGER


def tracked_days(data):
    return sum(1 for statuses in data.values() if statuses)


def average_attendance(students, stats):
    if not students:
        return 0
    total = sum(stats[s.id].percentage if s.id in stats else 0 for s in students)
    return percent(total, len(students) * 100)


def daily_trend(data):
    trend = []
    for day in sorted(data):
        statuses = data[day]
        if not statuses:
            continue
        present = sum(1 for status in statuses.values() if status == PRESENT)
        absent = sum(1 for status in statuses.values() if status == ABSENT)
        trend.append(DaySummary(date=day, present=present, absent=absent,
                                rate=percent(present, present + absent)))
    return trend


def day_details(day, students, data):
    """
    Every recorded status on ``day`` as ``(name, roll_no, status)`` rows.

    Ids missing from the roster are shown by their raw id, after the known
    students.
    """
    by_id = {s.id: s for s in students}
    rows = []
    unresolved = []
    for student_id, status in data.get(day, {}).items():
        student = by_id.get(student_id)
        if student is None:
            unresolved.append((student_id, "-", status))
        else:
            rows.append((student.name, student.roll_no, status))

    rows.sort(key=lambda row: (natural_key(row[1]), row[0].lower()))
    return rows + sorted(unresolved)


def performance_table(students, stats):
    rows = []
    for student in sort_students(students):
        student_stats = stats.get(student.id)
        present = student_stats.present if student_stats else 0
        total = student_stats.total if student_stats else 0
        percentage = student_stats.percentage if student_stats else 0
        rows.append([
            student.roll_no,
            student.name,
            present,
            total,
            percentage,
            performance_label(percentage),
        ])

    return pd.DataFrame(rows, columns=PERFORMANCE_COLUMNS)


def build_report():
    students = get_students()
    data = get_attendance_data()
    stats = get_attendance_stats(students, data)

    return Report(
        tracked_days=tracked_days(data),
        average_attendance=average_attendance(students, stats),
        student_count=len(students),
        table=performance_table(students, stats),
        trend=daily_trend(data),
    )
