from datetime import datetime, timezone

import pytest

from scenario_split.record.schema import ScenarioRecord


LOGIN_STEPS = [
    "the user opens the app",
    "the user enters valid credentials",
    "the user sees the dashboard",
]


@pytest.fixture
def timestamp():
    return datetime(2017, 6, 1, 12, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def login_record():
    return ScenarioRecord(
        tags=["@smoke"],
        group_name="Login",
        name="Valid login",
        steps=LOGIN_STEPS,
        keywords=["Given", "When", "Then"],
    )


@pytest.fixture
def record_file(tmp_path):
    """Write a YAML record and return its path."""
    def _write(content: str, name: str = "record.yaml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
