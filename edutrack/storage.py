import copy
import json
import logging
import os

from edutrack.constants import PROGRAM_STORAGE

logger = logging.getLogger(__name__)


def get_storage_path(key):
    return os.path.join(PROGRAM_STORAGE, f"{key}.json")


def create_folders():
    if not os.path.exists(PROGRAM_STORAGE):
        os.makedirs(PROGRAM_STORAGE)


def load_data(key, default):
    """
    Read the value stored under ``key``.

    A missing key is seeded with ``default``. Unreadable or malformed data,
    including a value whose top-level type differs from ``default``, is
    replaced by a fresh copy of ``default``.
    """
    filepath = get_storage_path(key)
    if not os.path.exists(filepath):
        try:
            create_folders()
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(default, f, ensure_ascii=False, indent=4)
        except OSError:
            logger.warning("Could not seed %s with defaults", filepath)
        return copy.deepcopy(default)

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        logger.warning("Ignoring unreadable data in %s", filepath)
        return copy.deepcopy(default)

    if not isinstance(data, type(default)):
        logger.warning("Ignoring data of unexpected type in %s", filepath)
        return copy.deepcopy(default)
    return data


def save_data(key, data):
    filepath = get_storage_path(key)
    try:
        create_folders()
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=4)
        return True
    except (OSError, TypeError, ValueError):
        logger.exception("Failed to save %s", filepath)
        return False
