"""Vercel serverless entrypoint for the listings endpoint."""

import sys
from pathlib import Path

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from listings_adapter.adapters.http.server import ListingsRequestHandler


class handler(ListingsRequestHandler):
    pass
