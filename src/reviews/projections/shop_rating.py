"""ShopRating: review counters and average rate per shop."""

import json

from protean.core.projector import on
from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, Float, Identifier, Integer, Text
from protean.utils.globals import current_domain

from reviews.domain import reviews
from reviews.review.events import ReviewStatusChanged, ReviewSubmitted
from reviews.review.review import Review, ReviewStatus


@reviews.projection
class ShopRating:
    shop_id = Identifier(identifier=True, required=True)
    total_reviews = Integer(default=0)
    approved_reviews = Integer(default=0)
    average_rate = Float(default=0.0)
    rate_distribution = Text()  # JSON: {"1": 0, "2": 0, "3": 0, "4": 0, "5": 0}
    updated_at = DateTime()


def _default_distribution():
    return {str(rate): 0 for rate in range(1, 6)}


def _recalculate_average(distribution):
    total = sum(distribution.values())
    if total == 0:
        return 0.0
    weighted_sum = sum(int(rate) * count for rate, count in distribution.items())
    return round(weighted_sum / total, 2)


def empty_rating(shop_id):
    return ShopRating(
        shop_id=shop_id,
        total_reviews=0,
        approved_reviews=0,
        average_rate=0.0,
        rate_distribution=json.dumps(_default_distribution()),
    )


def _get_or_create(shop_id):
    try:
        return current_domain.repository_for(ShopRating).get(shop_id)
    except ObjectNotFoundError:
        return empty_rating(shop_id)


@reviews.projector(projector_for=ShopRating, aggregates=[Review])
class ShopRatingProjector:
    @on(ReviewSubmitted)
    def on_review_submitted(self, event):
        rating = _get_or_create(str(event.shop_id))
        distribution = json.loads(rating.rate_distribution) if rating.rate_distribution else _default_distribution()

        rate_key = str(event.rate)
        distribution[rate_key] = distribution.get(rate_key, 0) + 1

        rating.total_reviews = (rating.total_reviews or 0) + 1
        if event.status == ReviewStatus.APPROVED.value:
            rating.approved_reviews = (rating.approved_reviews or 0) + 1
        rating.rate_distribution = json.dumps(distribution)
        rating.average_rate = _recalculate_average(distribution)
        rating.updated_at = event.submitted_at

        current_domain.repository_for(ShopRating).add(rating)

    @on(ReviewStatusChanged)
    def on_review_status_changed(self, event):
        rating = _get_or_create(str(event.shop_id))

        if event.status == ReviewStatus.APPROVED.value:
            rating.approved_reviews = (rating.approved_reviews or 0) + 1
        elif event.previous_status == ReviewStatus.APPROVED.value:
            rating.approved_reviews = max(0, (rating.approved_reviews or 0) - 1)
        rating.updated_at = event.changed_at

        current_domain.repository_for(ShopRating).add(rating)
