"""Hugging Face Inference API provider.

Every filter posts JSON to ``{base_url}/models/{model}`` and expects the
generated image reference under ``generated_image``, either in the first
element of a list response or at the top level of an object response.
"""

from typing import Any

import httpx
from loguru import logger

from ..errors import UpstreamError
from .base import ImageInferenceProvider
from .filters import ImageFilter


def extract_generated_image(data: Any) -> str | None:
    """Pull the generated image reference out of an inference response."""
    if isinstance(data, list):
        data = data[0] if data else None
    if isinstance(data, dict):
        value = data.get("generated_image")
        if isinstance(value, str) and value:
            return value
    return None


class HuggingFaceInference(ImageInferenceProvider):
    """Hugging Face hosted inference for image-to-image models."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api-inference.huggingface.co",
        timeout: float = 30.0,
    ):
        """Initialize the Hugging Face provider.

        Args:
            api_key: Hugging Face API token (sent as a bearer token)
            base_url: Inference API base URL
            timeout: HTTP request timeout in seconds

        Raises:
            ValueError: If api_key is empty

        """
        if not api_key:
            raise ValueError("Hugging Face API key is required")

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        logger.debug("Initialized Hugging Face inference: url={}", self.base_url)

    def model_url(self, image_filter: ImageFilter) -> str:
        """Return the endpoint URL for a filter's model."""
        return f"{self.base_url}/models/{image_filter.model}"

    async def transform(self, image_filter: ImageFilter, image_url: str) -> str:
        url = self.model_url(image_filter)
        logger.debug("Posting {} request to {}", image_filter.name, url)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    url,
                    json=image_filter.build_payload(image_url),
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
        except httpx.HTTPError as e:
            raise UpstreamError(f"Hugging Face API request failed: {e}") from e

        if not response.is_success:
            raise UpstreamError(f"Hugging Face API error: {response.status_code}")

        try:
            data = response.json()
        except ValueError:
            data = None

        generated = extract_generated_image(data)
        if not generated:
            raise UpstreamError(f"{image_filter.label} failed: No output image")

        return generated

    @property
    def name(self) -> str:
        return "Hugging Face"
