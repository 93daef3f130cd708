#!/usr/bin/env python3
"""
Read-only web view of a loaded grocery frequency table
"""

import argparse
import logging
from datetime import datetime
from typing import List, Optional

from fastapi import FastAPI, APIRouter
import uvicorn

from src.api.models import HealthResponse, HistogramResponse, ItemListResponse, LookupResponse
from src.core.config import get_settings
from src.core.constants import SCHEMA_VERSION
from src.core.schemas import ItemFrequency
from src.groceries.tracker import FrequencyTracker, SourceUnavailable, normalize

logger = logging.getLogger(__name__)


def create_app(tracker: FrequencyTracker) -> FastAPI:
    """Build the app around an already loaded tracker; requests never mutate it."""

    def as_text(value: str) -> str:
        # Undecodable input bytes are kept as surrogates in the table; JSON needs valid text
        return value.encode(tracker.encoding, "surrogateescape").decode(tracker.encoding, "replace")

    app = FastAPI(title="Grocery Frequency Tracker", version="1.0.0")
    router_v1 = APIRouter(prefix="/api/v1")

    @router_v1.get("/items", response_model=ItemListResponse)
    async def list_items():
        items = [ItemFrequency(name=as_text(name), count=count) for name, count in tracker.entries()]
        return ItemListResponse(items=items, schema_version=SCHEMA_VERSION)

    @router_v1.get("/items/{name:path}", response_model=LookupResponse)
    async def lookup_item(name: str):
        return LookupResponse(query=name, name=normalize(name), count=tracker.lookup(name))

    @router_v1.get("/histogram", response_model=HistogramResponse)
    async def histogram():
        return HistogramResponse(lines=[as_text(line) for line in tracker.histogram_lines()])

    @router_v1.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(status="online", items_loaded=len(tracker), timestamp=datetime.now().isoformat())

    app.include_router(router_v1)
    return app


def main(argv: Optional[List[str]] = None) -> None:
    s = get_settings()
    parser = argparse.ArgumentParser(description="Serve a grocery frequency table as JSON")
    parser.add_argument("input_file", nargs="?", default=s.input_file)
    parser.add_argument("--host", default=s.web_host)
    parser.add_argument("--port", type=int, default=s.web_port)
    args = parser.parse_args(argv)

    logging.basicConfig(level=s.log_level)
    tracker = FrequencyTracker(encoding=s.file_encoding)
    try:
        tracker.load(args.input_file)
    except SourceUnavailable as e:
        logger.error(f"{e}; serving an empty table")

    uvicorn.run(create_app(tracker), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
