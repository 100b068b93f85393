import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    marketplace_base_url: str = os.getenv("MARKETPLACE_BASE_URL", "https://prod.marketplace.tryrelevance.com/public/listings")
    listing_url_base: str = os.getenv("LISTING_URL_BASE", "https://marketplace.tryrelevance.com/listings")
    timeout_seconds: float = float(os.getenv("MARKETPLACE_TIMEOUT_SECONDS", "10"))
    user_agent: str = os.getenv("USER_AGENT", "listings-adapter/1.0")
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "3000"))


settings = Settings()
