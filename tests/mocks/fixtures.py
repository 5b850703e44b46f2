from __future__ import annotations
from typing import Any, List

import pytest

from pfq.suggest.models import RawResult


def make_record(id: Any, description: Any, kind: str | None = None, district: str | None = None) -> RawResult:
    return RawResult.from_dict({'id': id, 'description': description, 'kind': kind, 'district': district})


class RecordingNavigator:
    """Navigator double that records requests instead of opening anything."""

    def __init__(self):
        self.calls: List[tuple] = []

    def navigate_to_detail(self, pet_id):
        self.calls.append(('detail', pet_id))

    def navigate_to_filtered_list(self, description):
        self.calls.append(('list', description))


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def sample_records() -> List[RawResult]:
    """Eight records forming seven description groups."""
    return [
        make_record(1, 'Black cat', 'cat', 'North'),
        make_record(2, 'Ginger dog', 'dog', 'South'),
        make_record(3, '  black CAT ', 'cat', 'East'),
        make_record(4, 'White rabbit', 'rabbit'),
        make_record(5, 'Grey parrot', 'bird', 'West'),
        make_record(6, 'Brown hamster', 'hamster'),
        make_record(7, 'Spotted dalmatian', 'dog', 'Centre'),
        make_record(8, 'Tabby kitten', 'cat'),
    ]


__all__ = ['make_record', 'RecordingNavigator', 'navigator', 'sample_records']
