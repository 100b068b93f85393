from typing import Any, List, Optional
import requests
from ...domain.errors import UpstreamError
from ...domain.models import Listing, ListingsQuery
from ...domain.ports import ListingsSourcePort
from ...infrastructure.config import settings


class RelevanceMarketplaceClient(ListingsSourcePort):
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        self._owns_session = session is None
        self._session = session or requests.Session()
        self._base_url = base_url or settings.marketplace_base_url
        self._timeout = timeout if timeout is not None else settings.timeout_seconds
        self._headers = {
            "Accept": "application/json",
            "User-Agent": user_agent or settings.user_agent,
        }

    def _parse_results(self, data: Any) -> List[Listing]:
        results = data.get("results") if isinstance(data, dict) else None
        if not results:
            return []
        if isinstance(results, str):
            # a string destructures into characters, none of which is a listing
            return [Listing() for _ in results]
        if not isinstance(results, list):
            raise ValueError(f"unexpected results type: {type(results).__name__}")
        # keep positions; anything that is not an object is an empty slot
        return [Listing.from_api(item) if isinstance(item, dict) else Listing() for item in results]

    def fetch_listings(self, query: ListingsQuery) -> List[Listing]:
        params = query.to_params()
        print(f"[marketplace] GET {self._base_url} params={params}")
        resp = self._session.get(self._base_url, params=params, headers=self._headers, timeout=self._timeout)
        print(f"[marketplace] Status: {resp.status_code}")
        if not 200 <= resp.status_code < 300:
            print(f"[marketplace] API error {resp.status_code}: {resp.text}")
            raise UpstreamError(resp.status_code, resp.text)
        listings = self._parse_results(resp.json())
        print(f"[marketplace] Received {len(listings)} listings.")
        return listings

    def close(self) -> None:
        if self._owns_session:
            self._session.close()
