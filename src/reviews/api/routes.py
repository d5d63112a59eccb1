"""FastAPI routes for the Reviews bounded context.

``client_router`` is the public storefront API; ``admin_router`` serves the
merchant admin app. Both identify the shop by the ``x-shop-domain`` header.
Routes only translate between schemas and commands/repositories.
"""

from fastapi import APIRouter, Depends, Header, Query
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from reviews.api.schemas import (
    ReviewData,
    SetReviewStatusRequest,
    ShopData,
    ShopRatingData,
    SubmitReviewRequest,
)
from reviews.projections.shop_rating import ShopRating, empty_rating
from reviews.review.moderation import SetReviewStatus
from reviews.review.repository import DEFAULT_SORT, MAX_PAGE_SIZE
from reviews.review.review import Review
from reviews.review.submission import SubmitReview
from reviews.shop.shop import Shop
from reviews.utils.logging import add_context

client_router = APIRouter(prefix="/clientApi", tags=["client"])
admin_router = APIRouter(prefix="/api", tags=["admin"])


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------
async def shop_domain_header(x_shop_domain: str = Header(..., min_length=1)) -> str:
    """The shop domain named by the request."""
    add_context(shop_domain=x_shop_domain)
    return x_shop_domain


async def current_shop(shop_domain: str = Depends(shop_domain_header)) -> Shop:
    shop = current_domain.repository_for(Shop).find_by_domain(shop_domain)
    if shop is None:
        raise ObjectNotFoundError({"shop": [f"No shop found for domain {shop_domain}"]})
    return shop


def _success(data, status_code=200, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": True, "data": data, **extra})


def _review_of_shop(review_id: str, shop: Shop) -> Review:
    review = current_domain.repository_for(Review).get(review_id)
    if str(review.shop_id) != str(shop.id):
        raise ObjectNotFoundError({"review": [f"Review {review_id} does not exist"]})
    return review


# ---------------------------------------------------------------------------
# Storefront
# ---------------------------------------------------------------------------
@client_router.post("/reviews", status_code=201)
async def create_review(body: SubmitReviewRequest, shop_domain: str = Depends(shop_domain_header)):
    """Submit a review for the shop named in ``x-shop-domain``."""
    command = SubmitReview(
        shop_domain=shop_domain,
        rate=body.rate,
        content=body.content,
        title=body.title,
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        product_id=str(body.product_id) if body.product_id is not None else None,
        helpful=body.helpful,
        extra=dict(body.model_extra or {}),
    )
    review = current_domain.process(command, asynchronous=False)
    return _success(ReviewData.from_review(review).dump(), status_code=201)


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------
@admin_router.get("/shop")
async def get_shop(shop: Shop = Depends(current_shop)):
    return _success(ShopData.from_shop(shop).dump())


@admin_router.get("/reviews")
async def list_reviews(
    shop: Shop = Depends(current_shop),
    status: str | None = Query(None),
    sort: str = Query(DEFAULT_SORT),
    limit: int = Query(20, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
):
    """List the shop's reviews, optionally filtered by status and sorted by date or rate."""
    repo = current_domain.repository_for(Review)
    try:
        results = repo.find_for_shop(str(shop.id), status=status, sort=sort, limit=limit, offset=offset)
    except ValueError as exc:
        raise ValidationError({"query": [str(exc)]}) from exc

    return _success([ReviewData.from_review(review).dump() for review in results.items], total=results.total)


@admin_router.get("/reviews/summary")
async def get_rating_summary(shop: Shop = Depends(current_shop)):
    try:
        rating = current_domain.repository_for(ShopRating).get(str(shop.id))
    except ObjectNotFoundError:
        rating = empty_rating(str(shop.id))
    return _success(ShopRatingData.from_projection(rating).dump())


@admin_router.get("/reviews/{review_id}")
async def get_review(review_id: str, shop: Shop = Depends(current_shop)):
    return _success(ReviewData.from_review(_review_of_shop(review_id, shop)).dump())


@admin_router.put("/reviews/{review_id}/status")
async def set_review_status(review_id: str, body: SetReviewStatusRequest, shop: Shop = Depends(current_shop)):
    """Publish (``approved``) or unpublish (``disapproved``) a review."""
    command = SetReviewStatus(review_id=review_id, shop_id=str(shop.id), status=body.status)
    review = current_domain.process(command, asynchronous=False)
    return _success(ReviewData.from_review(review).dump())
