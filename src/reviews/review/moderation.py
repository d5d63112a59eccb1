"""SetReviewStatus: shop staff publish or unpublish a review."""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.review import Review
from reviews.utils.logging import get_logger

logger = get_logger(__name__)


@reviews.command(part_of="Review")
class SetReviewStatus:
    review_id = Identifier(required=True)
    shop_id = Identifier(required=True)
    status = String(required=True)  # "approved" or "disapproved"


@reviews.command_handler(part_of=Review)
class SetReviewStatusHandler:
    @handle(SetReviewStatus)
    def set_review_status(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        # Reviews of other shops are invisible rather than forbidden
        if str(review.shop_id) != str(command.shop_id):
            raise ObjectNotFoundError({"review": [f"Review {command.review_id} does not exist"]})

        previous = review.status
        review.set_status(command.status)
        repo.add(review)

        logger.info(
            "review_status_set",
            review_id=str(review.id),
            previous_status=previous,
            status=review.status,
        )
        return review
