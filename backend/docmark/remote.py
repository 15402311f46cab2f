from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import PurePosixPath
from urllib.parse import unquote

import httpx

from .document_text import decode_payload

logger = logging.getLogger(__name__)


class RemoteFetchError(RuntimeError):
    """Raised when a remote document cannot be used as conversion input."""


@dataclass(slots=True)
class RemoteDocument:
    file_name: str
    content: str
    content_type: str


class RemoteDocumentFetcher:
    """Small async client that downloads text documents by URL."""

    def __init__(
        self,
        timeout: float = 15.0,
        max_bytes: int = 2 * 1024 * 1024,
        fallback_encoding: str = "gb18030",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout = timeout
        self.max_bytes = max_bytes
        self.fallback_encoding = fallback_encoding
        self._transport = transport

    async def fetch(self, url: str) -> RemoteDocument:
        try:
            parsed = httpx.URL(url.strip())
        except httpx.InvalidURL as exc:
            raise RemoteFetchError(f"Invalid URL: {url}") from exc
        if parsed.scheme not in {"http", "https"} or not parsed.host:
            raise RemoteFetchError("Only http and https URLs are supported")

        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            async with client.stream("GET", parsed) as response:
                response.raise_for_status()
                declared = response.headers.get("Content-Length")
                if declared and declared.isdigit() and int(declared) > self.max_bytes:
                    raise RemoteFetchError(
                        f"Remote document is {declared} bytes, the limit is {self.max_bytes}"
                    )

                buffer = bytearray()
                async for chunk in response.aiter_bytes():
                    buffer.extend(chunk)
                    if len(buffer) > self.max_bytes:
                        raise RemoteFetchError(
                            f"Remote document exceeds the limit of {self.max_bytes} bytes"
                        )
                content_type = response.headers.get("Content-Type", "text/plain")

        payload = bytes(buffer)
        file_name = PurePosixPath(unquote(parsed.path)).name or parsed.host
        logger.info("Fetched %s (%s bytes, %s)", parsed, len(payload), content_type)
        return RemoteDocument(
            file_name=file_name,
            content=decode_payload(payload, self.fallback_encoding),
            content_type=content_type,
        )


__all__ = ["RemoteDocument", "RemoteDocumentFetcher", "RemoteFetchError"]
