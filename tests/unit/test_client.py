from datetime import datetime, timezone

import pytest
import requests

from pfq.api.client import PetRegistryClient, parse_listing_date
from pfq.api.errors import HttpError, NetworkFailure, ParseFailure, SearchError
from tests.mocks.stub_http import StubResponse, StubSession, orders_payload


def make_client(*responses, retries=2):
    session = StubSession(list(responses))
    client = PetRegistryClient('https://registry.test/api/', timeout=3, retries=retries, session=session)
    return client, session


def test_search_issues_single_get_with_query_param():
    client, session = make_client(StubResponse(200, orders_payload({'id': 1, 'description': 'Black cat'})))
    results = client.search_orders('black cat & co')
    assert [r.id for r in results] == [1]
    assert len(session.calls) == 1
    call = session.calls[0]
    assert call['url'] == 'https://registry.test/api/search'
    assert call['params'] == {'query': 'black cat & co'}
    assert call['timeout'] == 3


def test_search_parses_optional_fields():
    client, _ = make_client(StubResponse(200, orders_payload(
        {'id': 'a1', 'description': 'Ginger dog', 'kind': 'dog', 'district': 'South', 'date': '2024-01-02'},
        {'id': 'a2', 'description': 'White rabbit'},
        'not-a-record',
    )))
    first, second = client.search_orders('ginger')
    assert (first.kind, first.district, first.data['date']) == ('dog', 'South', '2024-01-02')
    assert second.kind is None and second.district is None


@pytest.mark.parametrize('payload', [
    {},
    {'data': None},
    {'data': {}},
    {'data': {'orders': None}},
    {'data': {'orders': 'oops'}},
    {'data': {'orders': []}},
])
def test_missing_or_malformed_orders_means_no_results(payload):
    client, _ = make_client(StubResponse(200, payload))
    assert client.search_orders('hamster') == []


def test_http_error():
    client, session = make_client(StubResponse(503, {}))
    with pytest.raises(HttpError) as exc:
        client.search_orders('parrot')
    assert exc.value.status == 503
    assert len(session.calls) == 1


def test_invalid_json_is_parse_failure():
    client, _ = make_client(StubResponse(200, text='<html>'))
    with pytest.raises(ParseFailure):
        client.search_orders('parrot')


def test_non_object_body_is_parse_failure():
    client, _ = make_client(StubResponse(200, ['a', 'b']))
    with pytest.raises(ParseFailure):
        client.search_orders('parrot')


def test_network_failure_is_not_retried_for_search():
    client, session = make_client(requests.ConnectionError('down'), StubResponse(200, orders_payload()))
    with pytest.raises(NetworkFailure):
        client.search_orders('parrot')
    assert len(session.calls) == 1


def test_errors_share_base_class():
    assert issubclass(NetworkFailure, SearchError)
    assert issubclass(HttpError, SearchError)
    assert issubclass(ParseFailure, SearchError)


def test_list_pets_retries_network_failures(monkeypatch):
    monkeypatch.setattr('time.sleep', lambda s: None)
    client, session = make_client(
        requests.Timeout('slow'),
        StubResponse(200, orders_payload({'id': 1, 'description': 'x'})),
    )
    assert [p.id for p in client.list_pets()] == [1]
    assert len(session.calls) == 2
    assert session.calls[0]['url'] == 'https://registry.test/api/pets'


def test_list_pets_gives_up_after_retries(monkeypatch):
    monkeypatch.setattr('time.sleep', lambda s: None)
    client, session = make_client(requests.Timeout('slow'), requests.Timeout('slow'), retries=2)
    with pytest.raises(NetworkFailure):
        client.list_pets()
    assert len(session.calls) == 2


def test_list_pets_does_not_retry_http_errors():
    client, session = make_client(StubResponse(500, {}), StubResponse(200, orders_payload()))
    with pytest.raises(HttpError):
        client.list_pets()
    assert len(session.calls) == 1


def test_latest_pets_sorted_by_date_desc():
    client, _ = make_client(StubResponse(200, orders_payload(
        {'id': 1, 'date': '2024-03-01'},
        {'id': 2},
        {'id': 3, 'date': '2024-05-10'},
        {'id': 4, 'date': '2023-12-31'},
    )))
    assert [p.id for p in client.latest_pets(3)] == [3, 1, 4]


def test_latest_pets_compares_instants_across_offsets():
    client, _ = make_client(StubResponse(200, orders_payload(
        {'id': 1, 'date': '2024-09-30'},
        {'id': 2, 'date': '2024-10-01T08:00:00+03:00'},
        {'id': 3, 'date': '2024-10-01T07:00:00Z'},
        {'id': 4, 'date': '15.10.2023'},
        {'id': 5},
    )))
    assert [p.id for p in client.latest_pets(10)] == [3, 2, 1, 4, 5]


def test_parse_listing_date():
    assert parse_listing_date('2024-10-01T08:00:00+03:00') == datetime(2024, 10, 1, 5, tzinfo=timezone.utc)
    assert parse_listing_date('2024-09-30') == datetime(2024, 9, 30, tzinfo=timezone.utc)
    assert parse_listing_date('15.10.2023') is None
    assert parse_listing_date(None) is None
    assert parse_listing_date(20240930) is None


def test_success_stories():
    client, session = make_client(StubResponse(200, {'data': {'pets': [{'id': 9}, 'junk']}}))
    assert client.success_stories() == [{'id': 9}]
    assert session.calls[0]['url'].endswith('/pets/slider')
