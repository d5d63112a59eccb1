"""Integration tests for the ShopRating projection."""

import json
from datetime import UTC, datetime
from unittest.mock import patch

from protean import current_domain
from reviews.projections.shop_rating import ShopRating, ShopRatingProjector, empty_rating
from reviews.review.events import ReviewStatusChanged
from reviews.review.moderation import SetReviewStatus
from reviews.review.submission import SubmitReview

SHOP_ID = "DGmlZG6trNcllnVSkOQ6"
SHOP_DOMAIN = "avada-second-chance.myshopify.com"


def _submit(rate=5):
    return current_domain.process(
        SubmitReview(shop_domain=SHOP_DOMAIN, rate=rate, content="Projection test"),
        asynchronous=False,
    )


def _set_status(review_id, status):
    current_domain.process(
        SetReviewStatus(review_id=review_id, shop_id=SHOP_ID, status=status),
        asynchronous=False,
    )


def _rating():
    return current_domain.repository_for(ShopRating).get(SHOP_ID)


class TestShopRatingOnSubmit:
    def test_created_on_first_review(self, shop):
        _submit(rate=4)
        rating = _rating()
        assert rating.total_reviews == 1
        assert rating.approved_reviews == 0
        assert rating.average_rate == 4.0

    def test_distribution_and_average(self, shop):
        for rate in (5, 5, 4, 1):
            _submit(rate=rate)
        rating = _rating()
        distribution = json.loads(rating.rate_distribution)
        assert rating.total_reviews == 4
        assert distribution == {"1": 1, "2": 0, "3": 0, "4": 1, "5": 2}
        assert rating.average_rate == 3.75

    def test_other_shops_are_counted_separately(self, shop, other_shop):
        _submit()
        current_domain.process(
            SubmitReview(shop_domain="other-store.myshopify.com", rate=2),
            asynchronous=False,
        )
        assert _rating().total_reviews == 1
        assert current_domain.repository_for(ShopRating).get("Xq7T2mWcPz8LrK4uYbN1").average_rate == 2.0


class TestShopRatingOnStatusChange:
    def test_publish_counts_approved(self, shop):
        review = _submit()
        _set_status(str(review.id), "approved")
        assert _rating().approved_reviews == 1

    def test_unpublish_releases_approved(self, shop):
        review = _submit()
        _set_status(str(review.id), "approved")
        _set_status(str(review.id), "disapproved")
        assert _rating().approved_reviews == 0

    def test_repeated_status_does_not_double_count(self, shop):
        review = _submit()
        _set_status(str(review.id), "approved")
        _set_status(str(review.id), "approved")
        assert _rating().approved_reviews == 1

    def test_status_change_leaves_average_untouched(self, shop):
        first = _submit(rate=5)
        _submit(rate=3)
        _set_status(str(first.id), "approved")
        rating = _rating()
        assert rating.total_reviews == 2
        assert rating.average_rate == 4.0


class TestShopRatingProjectorEdgeCases:
    def test_unpublish_never_goes_negative(self):
        rating = empty_rating(SHOP_ID)
        event = ReviewStatusChanged(
            review_id="review-1",
            shop_id=SHOP_ID,
            rate=5,
            previous_status="approved",
            status="disapproved",
            changed_at=datetime.now(UTC),
        )
        with patch("reviews.projections.shop_rating._get_or_create", return_value=rating):
            ShopRatingProjector().on_review_status_changed(event)
        assert rating.approved_reviews == 0

    def test_empty_rating_has_zero_distribution(self):
        rating = empty_rating(SHOP_ID)
        assert json.loads(rating.rate_distribution) == {"1": 0, "2": 0, "3": 0, "4": 0, "5": 0}
        assert rating.average_rate == 0.0
