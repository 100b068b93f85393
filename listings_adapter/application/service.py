from typing import Dict, List, Optional
from ..domain.models import Listing, ListingsQuery, UserContext
from ..domain.ports import ListingsSourcePort
from ..infrastructure.config import settings

SLOTS = 3


class ListingsService:
    def __init__(self, source: ListingsSourcePort, listing_url_base: Optional[str] = None) -> None:
        self.source = source
        self.listing_url_base = (listing_url_base or settings.listing_url_base).rstrip("/")

    def build_query(self, user: UserContext) -> ListingsQuery:
        # user context is accepted but does not narrow the query yet
        return ListingsQuery()

    def listing_url(self, listing: Optional[Listing]) -> str:
        if listing is None or not listing.display_id:
            return ""
        return f"{self.listing_url_base}/{listing.display_id}"

    def _flatten_slot(self, slot: int, listing: Optional[Listing]) -> Dict[str, str]:
        prefix = f"listing_{slot}_"
        if listing is None:
            listing = Listing()
        return {
            prefix + "name": listing.name or "",
            prefix + "desc": listing.description or "",
            prefix + "url": self.listing_url(listing),
            prefix + "image": listing.image or "",
        }

    def flatten(self, listings: List[Listing]) -> Dict[str, str]:
        payload: Dict[str, str] = {}
        for slot in range(1, SLOTS + 1):
            listing = listings[slot - 1] if slot <= len(listings) else None
            payload.update(self._flatten_slot(slot, listing))
        return payload

    def top_listings(self, user: Optional[UserContext] = None) -> Dict[str, str]:
        query = self.build_query(user or UserContext())
        listings = self.source.fetch_listings(query)
        if len(listings) > SLOTS:
            print(f"[service] Ignoring {len(listings) - SLOTS} listings beyond slot {SLOTS}.")
        return self.flatten(listings)

    def close(self) -> None:
        self.source.close()
