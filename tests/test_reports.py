from edutrack.constants import PRESENT, ABSENT, COLOR_SUCCESS, COLOR_WARNING, COLOR_DANGER
from edutrack.logic import get_attendance_stats, update_attendance
from edutrack.models import Student, StudentStats
from edutrack.reports import (
    PERFORMANCE_COLUMNS,
    performance_label,
    performance_color,
    tracked_days,
    average_attendance,
    daily_trend,
    day_details,
    performance_table,
    build_report,
)


def test_performance_tiers():
    assert performance_label(100) == "Excellent"
    assert performance_label(90) == "Excellent"
    assert performance_label(89) == "Good"
    assert performance_label(75) == "Good"
    assert performance_label(60) == "Average"
    assert performance_label(59) == "Poor"

    assert performance_color(90) == COLOR_SUCCESS
    assert performance_color(75) == COLOR_WARNING
    assert performance_color(74) == COLOR_DANGER


def test_tracked_days_skips_empty_dates(sample_record):
    assert tracked_days(sample_record) == 2
    assert tracked_days({}) == 0


def test_daily_trend_is_ordered_by_date():
    record = {
        "2026-01-06": {"1": PRESENT, "2": ABSENT},
        "2026-01-05": {"1": PRESENT, "2": PRESENT, "3": PRESENT, "4": ABSENT, "5": ABSENT},
        "2026-01-07": {},
    }

    trend = daily_trend(record)

    assert [day.date for day in trend] == ["2026-01-05", "2026-01-06"]
    assert (trend[0].present, trend[0].absent, trend[0].rate) == (3, 2, 60)
    assert trend[1].rate == 50
    assert trend[0].marked == 5


def test_average_attendance(students, sample_record):
    stats = get_attendance_stats(students, sample_record)

    # 100, 50, 100, 0, 0
    assert average_attendance(students, stats) == 50
    assert average_attendance([], {}) == 0


def test_average_attendance_counts_students_without_stats():
    students = [Student(id="1", roll_no="1", name="A"), Student(id="2", roll_no="2", name="B")]

    assert average_attendance(students, {"1": StudentStats(1, 1, 100)}) == 50


def test_day_details_resolves_names(students):
    record = {"2026-01-05": {"2": ABSENT, "1": PRESENT, "ghost-7": PRESENT}}

    rows = day_details("2026-01-05", students, record)

    assert rows == [
        ("Alice Johnson", "001", PRESENT),
        ("Bob Smith", "002", ABSENT),
        ("ghost-7", "-", PRESENT),
    ]
    assert day_details("2026-01-09", students, record) == []


def test_performance_table(students, sample_record):
    table = performance_table(students, get_attendance_stats(students, sample_record))

    assert list(table.columns) == PERFORMANCE_COLUMNS
    assert len(table) == 5
    first = table.iloc[0]
    assert first["name"] == "Alice Johnson"
    assert first["percentage"] == 100
    assert first["performance"] == "Excellent"
    assert table.iloc[3]["performance"] == "Poor"


def test_build_report_for_empty_record(students):
    report = build_report()

    assert report.is_empty
    assert report.tracked_days == 0
    assert report.average_attendance == 0
    assert report.student_count == 5
    assert report.trend == []
    assert (report.table["percentage"] == 0).all()


def test_build_report(students):
    for student_id in ("1", "2", "3"):
        update_attendance(student_id, "2026-01-05", PRESENT)
    for student_id in ("4", "5"):
        update_attendance(student_id, "2026-01-05", ABSENT)

    report = build_report()

    assert not report.is_empty
    assert report.tracked_days == 1
    assert report.trend[0].rate == 60
    assert report.average_attendance == 60
