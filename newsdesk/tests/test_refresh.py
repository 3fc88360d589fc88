import threading
import time
import unittest

from newsdesk.generators import PlainArticleGenerator
from newsdesk.models import Article, GeneratorKind, Market
from newsdesk.refresh import RefreshJob
from newsdesk.store import ArticleStore


class _StaticSource:
    def __init__(self, markets):
        self._markets = markets
        self.calls = 0

    def fetch_markets(self):
        self.calls += 1
        return list(self._markets)


class _SlowFirstGenerator:
    """Earlier markets take longer, so completion order is the reverse of input order."""

    kind = GeneratorKind.PLAIN

    def __init__(self, count):
        self.count = count

    def generate(self, market):
        time.sleep((self.count - int(market.id)) * 0.01)
        return Article.from_market(market)


class _BlockingSource:
    def __init__(self):
        self.entered = threading.Event()
        self.release = threading.Event()

    def fetch_markets(self):
        self.entered.set()
        self.release.wait(5)
        return []


def _markets(count):
    return [Market.from_payload({"id": str(i), "question": f"Question {i}?"}) for i in range(count)]


class RefreshJobTests(unittest.TestCase):
    def test_empty_fetch_leaves_store_untouched(self):
        store = ArticleStore()
        previous = [Article.from_market(m) for m in _markets(3)]
        store.replace(previous)

        job = RefreshJob(_StaticSource([]), PlainArticleGenerator(), store)
        self.assertEqual(job.run(), 0)

        self.assertEqual(list(store.snapshot()), previous)
        self.assertEqual(store.refresh_count, 1)

    def test_articles_follow_market_order_not_completion_order(self):
        store = ArticleStore()
        job = RefreshJob(_StaticSource(_markets(6)), _SlowFirstGenerator(6), store, max_workers=6)

        self.assertEqual(job.run(), 6)

        self.assertEqual([a.id for a in store.snapshot()], ["0", "1", "2", "3", "4", "5"])

    def test_only_first_fifteen_markets_are_published(self):
        store = ArticleStore()
        job = RefreshJob(_StaticSource(_markets(20)), PlainArticleGenerator(), store)

        self.assertEqual(job.run(), 15)

        self.assertEqual([a.id for a in store.snapshot()], [str(i) for i in range(15)])

    def test_new_cycle_replaces_rather_than_merges(self):
        store = ArticleStore()
        store.replace([Article.from_market(Market.from_payload({"id": "old"}))])
        job = RefreshJob(_StaticSource(_markets(2)), PlainArticleGenerator(), store)

        job.run()

        self.assertEqual([a.id for a in store.snapshot()], ["0", "1"])
        self.assertIsNone(store.find("old"))

    def test_overlapping_cycle_is_skipped(self):
        source = _BlockingSource()
        job = RefreshJob(source, PlainArticleGenerator(), ArticleStore())
        worker = threading.Thread(target=job.run)
        worker.start()
        try:
            self.assertTrue(source.entered.wait(5))
            with self.assertLogs("newsdesk.refresh", level="WARNING"):
                self.assertEqual(job.run(), 0)
        finally:
            source.release.set()
            worker.join(5)


class EndToEndTests(unittest.TestCase):
    def test_plain_strategy_scenario(self):
        markets = [
            Market.from_payload(
                {"id": 1, "question": "Will X happen?", "outcomePrices": ["0.73", "0.27"], "category": "Politics"}
            ),
            Market.from_payload({"id": 2, "question": "Will Y happen?"}),
        ]
        store = ArticleStore()
        RefreshJob(_StaticSource(markets), PlainArticleGenerator(), store).run()

        first, second = store.snapshot()
        self.assertEqual((first.id, first.title, first.probability, first.category), ("1", "Will X happen?", "73.0", "Politics"))
        self.assertEqual((second.id, second.title, second.probability, second.category), ("2", "Will Y happen?", "N/A", "Politics"))


if __name__ == "__main__":
    unittest.main()
