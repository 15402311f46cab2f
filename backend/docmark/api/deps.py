"""Common dependency functions for API routes."""

from functools import lru_cache
from typing import Generator

from fastapi import Depends

from docmark.core.config import Settings, get_settings
from docmark.document_models import SlideTitles
from docmark.remote import RemoteDocumentFetcher


@lru_cache
def get_remote_fetcher() -> RemoteDocumentFetcher:
    settings = get_settings()
    return RemoteDocumentFetcher(
        timeout=settings.remote_fetch_timeout,
        max_bytes=settings.remote_fetch_max_bytes,
        fallback_encoding=settings.upload_fallback_encoding,
    )


def get_app_settings() -> Generator:
    yield get_settings()


def get_slide_titles(settings: Settings = Depends(get_app_settings)) -> SlideTitles:
    return settings.slide_titles()
