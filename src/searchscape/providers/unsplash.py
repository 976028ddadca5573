"""Unsplash image search provider.

Uses the random-photo endpoint so repeated prompts can yield different images.
"""

import httpx
from loguru import logger

from ..errors import UpstreamError
from .base import ImageSearchProvider


class UnsplashSearch(ImageSearchProvider):
    """Unsplash random-photo search."""

    def __init__(
        self,
        access_key: str,
        base_url: str = "https://api.unsplash.com",
        timeout: float = 30.0,
    ):
        """Initialize the Unsplash provider.

        Args:
            access_key: Unsplash API access key (sent as ``client_id``)
            base_url: API base URL
            timeout: HTTP request timeout in seconds

        Raises:
            ValueError: If access_key is empty

        """
        if not access_key:
            raise ValueError("Unsplash access key is required")

        self.access_key = access_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        logger.debug("Initialized Unsplash search: url={}", self.base_url)

    async def search(self, query: str) -> str:
        url = f"{self.base_url}/photos/random"
        logger.debug("Querying Unsplash: '{}'", query[:50])

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    url, params={"query": query, "client_id": self.access_key}
                )
        except httpx.HTTPError as e:
            raise UpstreamError(f"Unsplash API request failed: {e}") from e

        if not response.is_success:
            raise UpstreamError(f"Unsplash API error: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError("Invalid response from Unsplash API") from e

        image_url = None
        if isinstance(data, dict) and isinstance(data.get("urls"), dict):
            image_url = data["urls"].get("regular")
        if not isinstance(image_url, str) or not image_url:
            raise UpstreamError("Invalid response from Unsplash API")

        return image_url

    @property
    def name(self) -> str:
        return "Unsplash"
