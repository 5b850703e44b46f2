from pfq.api.errors import HttpError, NetworkFailure, ParseFailure
from pfq.suggest.pipeline import fetch_suggestions
from tests.mocks.fixtures import make_record


def _raising(exc):
    def fetch(query):
        raise exc
    return fetch


def test_groups_fetched_records(sample_records):
    groups = fetch_suggestions(lambda q: sample_records, 'black cat')
    assert len(groups) == 5
    assert groups[0].count == 2


def test_failures_degrade_to_empty_list():
    for exc in (NetworkFailure('down'), HttpError(500), ParseFailure('bad'), RuntimeError('boom')):
        assert fetch_suggestions(_raising(exc), 'black cat') == []


def test_max_groups_forwarded():
    records = [make_record(i, f'desc {i}') for i in range(4)]
    assert len(fetch_suggestions(lambda q: records, 'desc', max_groups=3)) == 3
