import pytest

from edutrack import storage
from edutrack.constants import PRESENT, ABSENT
from edutrack.logic import get_students, save_attendance_data


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    folder = tmp_path / "data"
    monkeypatch.setattr(storage, "PROGRAM_STORAGE", str(folder))
    return folder


@pytest.fixture
def students():
    return get_students()


@pytest.fixture
def sample_record():
    record = {
        "2026-01-05": {"1": PRESENT, "2": PRESENT, "3": PRESENT, "4": ABSENT, "5": ABSENT},
        "2026-01-06": {"1": PRESENT, "2": ABSENT},
        "2026-01-07": {},
    }
    save_attendance_data(record)
    return record
