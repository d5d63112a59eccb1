"""Pydantic request/response schemas for the Reviews API.

The wire format is camelCase, matching what the storefront widget and the
admin app send and expect; aggregates use snake_case. Unknown keys in a
submitted review are allowed and travel through as ``extra``.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def dump(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class SubmitReviewRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        json_schema_extra={
            "examples": [
                {
                    "rate": 5,
                    "content": "Great product",
                    "firstName": "Anh",
                    "lastName": "Tran",
                    "email": "anh@example.com",
                    "productId": 10018120892696,
                }
            ]
        },
    )

    rate: int = Field(..., ge=1, le=5)
    content: str | None = None
    title: str | None = Field(None, max_length=255)
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=254)
    product_id: int | str | None = None
    helpful: int = Field(0, ge=0)


class SetReviewStatusRequest(CamelModel):
    status: str  # "approved" or "disapproved"


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ReviewData(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    id: str
    shop_id: str
    shop_domain: str
    product_id: str | None = None
    rate: int
    title: str | None = None
    content: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    helpful: int = 0
    status: str
    skip_content_check: bool
    notification_channel: str
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_review(cls, review) -> ReviewData:
        declared = set(cls.model_fields) | {to_camel(name) for name in cls.model_fields}
        data = {key: value for key, value in (review.extra or {}).items() if key not in declared}
        data.update(
            id=str(review.id),
            shop_id=str(review.shop_id),
            shop_domain=review.shop_domain,
            product_id=review.product_id,
            rate=review.rate,
            title=review.title,
            content=review.content,
            first_name=review.first_name,
            last_name=review.last_name,
            email=review.email,
            helpful=review.helpful or 0,
            status=review.status,
            skip_content_check=review.skip_content_check,
            notification_channel=review.notification_channel,
            created_at=review.created_at,
            updated_at=review.updated_at,
        )
        return cls.model_validate(data)


class ShopData(CamelModel):
    id: str
    shopify_domain: str
    name: str | None = None
    email: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_shop(cls, shop) -> ShopData:
        return cls(
            id=str(shop.id),
            shopify_domain=shop.shopify_domain,
            name=shop.name,
            email=shop.email,
            created_at=shop.created_at,
        )


class ShopRatingData(CamelModel):
    shop_id: str
    total_reviews: int = 0
    approved_reviews: int = 0
    average_rate: float = 0.0
    rate_distribution: dict[str, int]
    updated_at: datetime | None = None

    @classmethod
    def from_projection(cls, rating) -> ShopRatingData:
        return cls(
            shop_id=str(rating.shop_id),
            total_reviews=rating.total_reviews or 0,
            approved_reviews=rating.approved_reviews or 0,
            average_rate=rating.average_rate or 0.0,
            rate_distribution=json.loads(rating.rate_distribution) if rating.rate_distribution else {},
            updated_at=rating.updated_at,
        )
