#!/usr/bin/env python3
"""
Load a JSON video catalog into the configured feed store.

The catalog is a list of content items, or an object with an "items" list.
Each item needs at least an "id"; other fields default (see ContentItem).

Usage:
  From repo root (store chosen by FEEDRANK_STORE, as for the server):
    python -m feedrank_server.scripts.seed_store data/catalog.json
  Into a specific JSON store file:
    FEEDRANK_STORE=json FEEDRANK_DATA_PATH=data/feed.json python -m feedrank_server.scripts.seed_store data/catalog.json
  Recompute quality scores after loading:
    python -m feedrank_server.scripts.seed_store data/catalog.json --refresh-quality
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List

from pydantic import ValidationError

from feedrank import ContentItem, FeedEngine, StoreError
from feedrank.models.content import ensure_items

from ..config import ServerConfig, configure_logging, load_ranking_config
from ..state import create_analyzer, create_store

logger = logging.getLogger(__name__)


def load_catalog(path: Path) -> List[ContentItem]:
    with open(path) as f:
        data = json.load(f)
    rows = data.get("items", []) if isinstance(data, dict) else data
    return ensure_items(rows)


def seed(store, items: List[ContentItem]) -> int:
    """Add items one by one; returns the number stored."""
    total = 0
    for item in items:
        try:
            store.add_item(item)
            total += 1
        except StoreError as e:
            logger.error("[store] could not add %s: %s", item.id, e)
    return total


def refresh_quality(store, config: ServerConfig, content_ids: Iterable[str]) -> int:
    """Recompute quality with the server's ranking config and poster analyzer."""
    engine = FeedEngine(
        store,
        config=load_ranking_config(config),
        analyzer=create_analyzer(config),
        max_workers=config.workers,
    )
    try:
        return engine.refresh_quality(list(content_ids))
    finally:
        engine.shutdown()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed the feed store from a JSON catalog")
    parser.add_argument("catalog", type=Path, help="Path to catalog JSON")
    parser.add_argument("--refresh-quality", action="store_true", help="Recompute quality scores after loading")
    args = parser.parse_args(argv)

    config = ServerConfig.from_env()
    configure_logging(config.log_level)

    if not args.catalog.is_file():
        logger.error("Catalog not found: %s", args.catalog)
        return 1
    try:
        items = load_catalog(args.catalog)
    except (json.JSONDecodeError, ValidationError) as e:
        logger.error("Invalid catalog %s: %s", args.catalog, e)
        return 1

    store = create_store(config)
    total = seed(store, items)
    logger.info("Seeded %d/%d items into %s", total, len(items), type(store).__name__)

    if args.refresh_quality:
        updated = refresh_quality(store, config, [item.id for item in items])
        logger.info("Refreshed quality for %d items", updated)
    return 0


if __name__ == "__main__":
    sys.exit(main())
