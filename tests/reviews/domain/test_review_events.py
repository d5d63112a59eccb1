"""Tests for Review event structure."""

from reviews.review.events import ReviewStatusChanged, ReviewSubmitted
from reviews.review.review import Review


def _make_review(**overrides):
    defaults = {
        "shop_id": "DGmlZG6trNcllnVSkOQ6",
        "shop_domain": "avada-second-chance.myshopify.com",
        "rate": 5,
        "content": "Great product",
        "product_id": "10018120892696",
    }
    defaults.update(overrides)
    return Review.submit(**defaults)


class TestEventVersions:
    def test_review_submitted_version(self):
        assert ReviewSubmitted.__version__ == 1

    def test_review_status_changed_version(self):
        assert ReviewStatusChanged.__version__ == 1


class TestReviewSubmittedEvent:
    def test_submit_raises_one_event(self):
        review = _make_review()
        assert len(review._events) == 1
        assert isinstance(review._events[0], ReviewSubmitted)

    def test_event_carries_review_and_shop(self):
        review = _make_review()
        event = review._events[0]
        assert event.review_id == str(review.id)
        assert str(event.shop_id) == "DGmlZG6trNcllnVSkOQ6"
        assert event.shop_domain == "avada-second-chance.myshopify.com"
        assert event.product_id == "10018120892696"

    def test_event_carries_rate_status_and_time(self):
        review = _make_review(rate=3)
        event = review._events[0]
        assert event.rate == 3
        assert event.status == "disapproved"
        assert event.submitted_at == review.created_at
