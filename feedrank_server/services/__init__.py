"""Backing services: feed stores and the OCR client."""

from .firestore_store import FirestoreFeedStore
from .json_store import JsonFeedStore
from .memory_store import InMemoryFeedStore
from .ocr_client import HttpTextExtractor

__all__ = [
    "FirestoreFeedStore",
    "HttpTextExtractor",
    "InMemoryFeedStore",
    "JsonFeedStore",
]
