from abc import ABC, abstractmethod
from typing import List
from .models import Listing, ListingsQuery


class ListingsSourcePort(ABC):
    @abstractmethod
    def fetch_listings(self, query: ListingsQuery) -> List[Listing]:
        ...

    def close(self) -> None:
        pass
