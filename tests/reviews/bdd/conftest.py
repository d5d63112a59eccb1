"""Shared BDD fixtures and step definitions for the Reviews domain."""

import pytest
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then
from reviews.review.events import ReviewStatusChanged, ReviewSubmitted
from reviews.review.review import Review

SHOP_ID = "DGmlZG6trNcllnVSkOQ6"
SHOP_DOMAIN = "avada-second-chance.myshopify.com"

_REVIEW_EVENT_CLASSES = {
    "ReviewSubmitted": ReviewSubmitted,
    "ReviewStatusChanged": ReviewStatusChanged,
}


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


def _submit_review(**overrides):
    values = {"shop_id": SHOP_ID, "shop_domain": SHOP_DOMAIN, "rate": 4, "content": "BDD test review"}
    values.update(overrides)
    return Review.submit(**values)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a submitted review", target_fixture="review")
def submitted_review():
    review = _submit_review()
    review._events.clear()
    return review


@given("a published review", target_fixture="review")
def published_review():
    review = _submit_review()
    review.publish()
    review._events.clear()
    return review


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the review status is "{status}"'))
def review_status_is(review, status):
    assert review.status == status


@then("the review action fails with a validation error")
def review_action_fails(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse("a {event_type} event is raised"))
def review_event_raised(review, event_type):
    event_cls = _REVIEW_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in review._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in review._events]}"


@then("no event is raised")
def no_event_raised(review):
    assert review._events == []
