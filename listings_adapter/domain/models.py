from dataclasses import dataclass
from typing import Any, Dict, Optional


def _str_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Listing:
    name: Optional[str] = None
    description: Optional[str] = None
    display_id: Optional[str] = None
    image: Optional[str] = None

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "Listing":
        return cls(
            name=_str_or_none(raw.get("name")),
            description=_str_or_none(raw.get("description")),
            display_id=_str_or_none(raw.get("display_id") or None),
            image=_str_or_none(raw.get("image")),
        )


@dataclass(frozen=True)
class UserContext:
    email: Optional[str] = None
    company: Optional[str] = None

    @classmethod
    def from_body(cls, body: Any) -> "UserContext":
        if not isinstance(body, dict):
            return cls()
        user = body.get("user")
        if not isinstance(user, dict):
            return cls()
        return cls(email=_str_or_none(user.get("email")), company=_str_or_none(user.get("company")))


@dataclass(frozen=True)
class ListingsQuery:
    entity_type: str = "agent"
    order_by: str = "clone_count"
    order_direction: str = "desc"
    page: int = 1
    page_size: int = 3

    def to_params(self) -> Dict[str, str]:
        return {
            "entityType": self.entity_type,
            "orderBy": self.order_by,
            "orderDirection": self.order_direction,
            "page": str(self.page),
            "pageSize": str(self.page_size),
        }
