from datetime import datetime

import pytest
from pydantic import ValidationError

from calendar_grid.grid import CalendarGrid
from calendar_grid.models import GridSnapshot


@pytest.fixture
def snapshot() -> GridSnapshot:
    return CalendarGrid(2, 2024, 0).snapshot()


def test_snapshot_helpers(snapshot: GridSnapshot):
    assert snapshot.days_in_month == 29
    assert snapshot.is_in_month(datetime(2024, 2, 29))
    assert not snapshot.is_in_month(datetime(2024, 1, 28))
    assert snapshot.model_dump_days()[0] == [28, 29, 30, 31, 1, 2, 3]
    assert snapshot.model_dump_days()[-1] == [3, 4, 5, 6, 7, 8, 9]


def test_snapshot_rejects_wrong_shape(snapshot: GridSnapshot):
    """Test that a grid with a missing row fails validation."""
    data = snapshot.model_dump()
    data["rows"] = data["rows"][:5]

    with pytest.raises(ValidationError):
        GridSnapshot(**data)


def test_snapshot_rejects_invalid_month(snapshot: GridSnapshot):
    data = snapshot.model_dump()
    data["month"] = 13

    with pytest.raises(ValidationError):
        GridSnapshot(**data)


def test_snapshot_json_round_trip(snapshot: GridSnapshot):
    restored = GridSnapshot.model_validate_json(snapshot.model_dump_json())
    assert restored == snapshot


def test_every_field_is_documented():
    undocumented = [
        name for name, field in GridSnapshot.model_fields.items() if not field.description
    ]
    assert undocumented == []
