"""Repository for the Review aggregate."""

from reviews.domain import reviews
from reviews.review.review import Review, ReviewStatus

# API sort keys -> aggregate attributes
SORT_FIELDS = {
    "createdAt": "created_at",
    "rate": "rate",
}
DEFAULT_SORT = "createdAt:desc"
MAX_PAGE_SIZE = 250


def parse_sort(sort: str | None) -> str:
    """Translate ``"<field>:<asc|desc>"`` into a Protean ``order_by`` expression.

    Raises ValueError for unknown fields or directions.
    """
    field, _, direction = (sort or DEFAULT_SORT).partition(":")
    direction = direction or "asc"
    if field not in SORT_FIELDS:
        raise ValueError(f"Cannot sort by '{field}', expected one of: {', '.join(SORT_FIELDS)}")
    if direction not in ("asc", "desc"):
        raise ValueError(f"Sort direction must be 'asc' or 'desc', got '{direction}'")
    attribute = SORT_FIELDS[field]
    return f"-{attribute}" if direction == "desc" else attribute


@reviews.repository(part_of=Review)
class ReviewRepository:
    def find_for_shop(
        self,
        shop_id: str,
        status: str | None = None,
        sort: str | None = DEFAULT_SORT,
        limit: int = 20,
        offset: int = 0,
    ):
        """Page through a shop's reviews.

        Returns the Protean ResultSet so callers get both ``items`` and the
        unpaged ``total``.
        """
        criteria = {"shop_id": shop_id}
        if status is not None:
            criteria["status"] = ReviewStatus(status).value

        return (
            self._dao.query.filter(**criteria)
            .order_by(parse_sort(sort))
            .offset(max(offset, 0))
            .limit(min(max(limit, 1), MAX_PAGE_SIZE))
            .all()
        )
