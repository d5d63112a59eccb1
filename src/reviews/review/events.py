"""Domain events for the Review aggregate.

Events feed the shop rating projection and are the hook for anything that
needs to react to new or re-moderated reviews (storefront cache refresh,
merchant notifications).
"""

from protean.fields import DateTime, Identifier, Integer, String

from reviews.domain import reviews


@reviews.event(part_of="Review")
class ReviewSubmitted:
    """A shopper submitted a review for one of the shop's products."""

    __version__ = 1

    review_id = Identifier(required=True)
    shop_id = Identifier(required=True)
    shop_domain = String(required=True)
    product_id = String()
    rate = Integer(required=True)
    status = String(required=True)
    submitted_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewStatusChanged:
    """Shop staff published or unpublished a review."""

    __version__ = 1

    review_id = Identifier(required=True)
    shop_id = Identifier(required=True)
    rate = Integer(required=True)
    previous_status = String(required=True)
    status = String(required=True)
    changed_at = DateTime(required=True)
