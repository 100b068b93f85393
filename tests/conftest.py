from typing import List

import pytest

from listings_adapter.application.service import ListingsService
from listings_adapter.domain.models import Listing, ListingsQuery
from listings_adapter.domain.ports import ListingsSourcePort


class FakeSource(ListingsSourcePort):
    def __init__(self, listings: List[Listing] = None, error: Exception = None):
        self.listings = listings or []
        self.error = error
        self.queries: List[ListingsQuery] = []

    def fetch_listings(self, query: ListingsQuery) -> List[Listing]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return list(self.listings)


@pytest.fixture
def make_service():
    def _make(listings=None, error=None):
        source = FakeSource(listings, error)
        return ListingsService(source, listing_url_base="https://marketplace.tryrelevance.com/listings")
    return _make


FIELD_NAMES = [
    f"listing_{slot}_{field}"
    for slot in (1, 2, 3)
    for field in ("name", "desc", "url", "image")
]
