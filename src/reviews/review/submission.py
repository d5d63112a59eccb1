"""SubmitReview: store a storefront review against the shop it came from.

The shop is resolved by its public domain first; only then is the review
written. The lookup and the write are separate store calls, not one
transaction: a shop removed in between still gets the review, carrying the
domain it had at lookup time.
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Dict, Integer, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.review import Review
from reviews.shop.shop import Shop
from reviews.utils.logging import get_logger

logger = get_logger(__name__)


@reviews.command(part_of="Review")
class SubmitReview:
    shop_domain = String(required=True)
    rate = Integer(required=True)
    content = Text()
    title = String(max_length=255)
    first_name = String(max_length=100)
    last_name = String(max_length=100)
    email = String(max_length=254)
    product_id = String(max_length=64)
    helpful = Integer(default=0)
    extra = Dict()


@reviews.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        shop = current_domain.repository_for(Shop).find_by_domain(command.shop_domain)
        if shop is None:
            logger.info("shop_not_found", shop_domain=command.shop_domain)
            raise ObjectNotFoundError({"shop": [f"No shop found for domain {command.shop_domain}"]})

        review = Review.submit(
            shop_id=shop.id,
            shop_domain=shop.shopify_domain,
            rate=command.rate,
            content=command.content,
            title=command.title,
            first_name=command.first_name,
            last_name=command.last_name,
            email=command.email,
            product_id=command.product_id,
            helpful=command.helpful,
            extra=command.extra,
        )
        current_domain.repository_for(Review).add(review)

        logger.info("review_submitted", review_id=str(review.id), shop_id=str(shop.id), rate=review.rate)
        return review
