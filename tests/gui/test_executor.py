"""Tests for QueryExecutor staleness handling."""

import threading

from pfq.api.errors import HttpError
from pfq.suggest.executor import QueryExecutor
from pfq.suggest.grouping import group_results
from tests.gui.helpers import wait_until
from tests.mocks.fixtures import make_record


def _groups(*descriptions):
    return group_results([make_record(i, d) for i, d in enumerate(descriptions)])


class TestTokens:
    """Token bookkeeping without running threads."""

    def _executor(self):
        executor = QueryExecutor(lambda q: [])
        started = []
        executor._start_worker = started.append
        published = []
        executor.resultsReady.connect(published.append)
        return executor, started, published

    def test_tokens_increase(self, qapp):
        executor, started, _ = self._executor()
        first = executor.search('black cat')
        second = executor.search('black cats')
        assert second > first
        assert executor.current_token == second
        assert [w.query for w in started] == ['black cat', 'black cats']

    def test_stale_result_discarded_when_out_of_order(self, qapp):
        executor, started, published = self._executor()
        slow, fast = executor.search('black'), executor.search('black cat')
        newest = _groups('Black cat')
        executor._on_loaded(fast, newest)
        executor._on_loaded(slow, _groups('Black dog'))
        assert published == [newest]

    def test_stale_result_discarded_when_in_order(self, qapp):
        executor, _, published = self._executor()
        first = executor.search('black')
        second = executor.search('black cat')
        executor._on_loaded(first, _groups('Black dog'))
        assert published == []
        executor._on_loaded(second, [])
        assert published == [[]]

    def test_invalidate_drops_pending(self, qapp):
        executor, _, published = self._executor()
        token = executor.search('black cat')
        executor.invalidate()
        assert executor.current_token is None
        executor._on_loaded(token, _groups('Black cat'))
        assert published == []


class TestThreaded:
    def test_results_delivered(self, qapp, sample_records):
        executor = QueryExecutor(lambda q: sample_records)
        published = []
        executor.resultsReady.connect(published.append)
        executor.search('black cat')
        assert wait_until(lambda: published)
        assert [g.display_description for g in published[0]][:1] == ['Black cat']
        assert wait_until(lambda: executor.in_flight == 0)

    def test_failure_becomes_empty_list(self, qapp):
        def fetch(query):
            raise HttpError(500)

        executor = QueryExecutor(fetch)
        published = []
        executor.resultsReady.connect(published.append)
        executor.search('black cat')
        assert wait_until(lambda: published)
        assert published == [[]]

    def test_slow_early_response_never_overwrites_newer(self, qapp):
        release = threading.Event()

        def fetch(query):
            if query == 'black':
                release.wait(5)
                return [make_record(1, 'Black dog')]
            return [make_record(2, 'Black cat')]

        executor = QueryExecutor(fetch)
        published = []
        executor.resultsReady.connect(published.append)
        executor.search('black')
        executor.search('black cat')
        assert wait_until(lambda: published)
        release.set()
        assert wait_until(lambda: executor.in_flight == 0)
        assert len(published) == 1
        assert published[0][0].display_description == 'Black cat'

    def test_shutdown_joins_workers(self, qapp):
        release = threading.Event()
        entered = threading.Event()

        def fetch(query):
            entered.set()
            release.wait(5)
            return [make_record(1, 'Black cat')]

        executor = QueryExecutor(fetch)
        published = []
        executor.resultsReady.connect(published.append)
        executor.search('black cat')
        assert entered.wait(2)
        # Worker is still blocked when shutdown() starts; the timer frees it mid-join
        timer = threading.Timer(0.2, release.set)
        timer.start()
        try:
            executor.shutdown()
        finally:
            timer.cancel()
        assert release.is_set()
        assert executor.in_flight == 0
        wait_until(lambda: False, timeout_ms=50)
        assert published == []
