"""Review load test scenarios.

Two journeys against one shop: storefront shoppers submitting reviews, and a
merchant reviewing and publishing them from the admin app. Run
``python src/manage.py add-shop <domain>`` against the target first; set
``LOADTEST_SHOP_DOMAIN`` to use a shop other than the default.
"""

import os
import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import DEFAULT_SHOP_DOMAIN, invalid_review_data, review_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ReviewState, ShopperState

SHOP_DOMAIN = os.getenv("LOADTEST_SHOP_DOMAIN", DEFAULT_SHOP_DOMAIN)
HEADERS = {"x-shop-domain": SHOP_DOMAIN}


class ShopperJourney(SequentialTaskSet):
    """Submit a couple of reviews, one of them malformed."""

    def on_start(self):
        self.state = ShopperState()

    @task
    def submit_review(self):
        with self.client.post(
            "/clientApi/reviews",
            json=review_data(),
            headers=HEADERS,
            catch_response=True,
            name="POST /clientApi/reviews",
        ) as resp:
            if resp.status_code == 201:
                self.state.review_ids.append(resp.json()["data"]["id"])
            else:
                resp.failure(f"Submit review failed: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def submit_invalid_review(self):
        with self.client.post(
            "/clientApi/reviews",
            json=invalid_review_data(),
            headers=HEADERS,
            catch_response=True,
            name="POST /clientApi/reviews [invalid]",
        ) as resp:
            if resp.status_code == 400:
                resp.success()
            else:
                resp.failure(f"Expected 400 for invalid review, got {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class MerchantModerationJourney(SequentialTaskSet):
    """Submit -> List -> Get -> Publish -> Summary.

    Generates 2 events: ReviewSubmitted, ReviewStatusChanged.
    """

    def on_start(self):
        self.state = ReviewState()

    @task
    def submit_review(self):
        with self.client.post(
            "/clientApi/reviews",
            json=review_data(),
            headers=HEADERS,
            catch_response=True,
            name="POST /clientApi/reviews",
        ) as resp:
            if resp.status_code == 201:
                self.state.review_id = resp.json()["data"]["id"]
            else:
                resp.failure(f"Submit review failed: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def list_reviews(self):
        params = {"status": "disapproved", "sort": random.choice(["createdAt:desc", "rate:desc"]), "limit": 20}
        with self.client.get(
            "/api/reviews",
            params=params,
            headers=HEADERS,
            catch_response=True,
            name="GET /api/reviews",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"List reviews failed: {extract_error_detail(resp)}")

    @task
    def get_review(self):
        with self.client.get(
            f"/api/reviews/{self.state.review_id}",
            headers=HEADERS,
            catch_response=True,
            name="GET /api/reviews/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Get review failed: {extract_error_detail(resp)}")

    @task
    def publish_review(self):
        with self.client.put(
            f"/api/reviews/{self.state.review_id}/status",
            json={"status": "approved"},
            headers=HEADERS,
            catch_response=True,
            name="PUT /api/reviews/{id}/status",
        ) as resp:
            if resp.status_code == 200:
                self.state.current_status = resp.json()["data"]["status"]
            else:
                resp.failure(f"Publish review failed: {extract_error_detail(resp)}")

    @task
    def rating_summary(self):
        with self.client.get(
            "/api/reviews/summary",
            headers=HEADERS,
            catch_response=True,
            name="GET /api/reviews/summary",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Rating summary failed: {extract_error_detail(resp)}")
        self.interrupt()


class ReviewsUser(HttpUser):
    """Locust user simulating review traffic.

    Weighted distribution:
    - 75% Shopper submissions (storefront traffic dominates)
    - 25% Merchant moderation
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        ShopperJourney: 3,
        MerchantModerationJourney: 1,
    }
