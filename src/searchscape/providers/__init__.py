"""External image providers package.

Provides factory functions to create the configured search and inference
providers.
"""

from .base import ImageInferenceProvider, ImageSearchProvider
from .filters import FILTERS, ImageFilter, filter_choices, resolve_filter
from .huggingface import HuggingFaceInference
from .unsplash import UnsplashSearch


def create_search_provider(
    provider_type: str = "unsplash",
    api_key: str = "",
    base_url: str | None = None,
    timeout: float = 30.0,
) -> ImageSearchProvider:
    """Create an image search provider instance.

    Args:
        provider_type: Type of provider ("unsplash")
        api_key: Access key for the provider
        base_url: Optional API base URL override
        timeout: HTTP request timeout in seconds

    Returns:
        Configured ImageSearchProvider instance

    Raises:
        ValueError: If provider_type is not recognized or api_key is empty

    """
    if provider_type == "unsplash":
        return UnsplashSearch(
            access_key=api_key,
            base_url=base_url or "https://api.unsplash.com",
            timeout=timeout,
        )
    else:
        raise ValueError(f"Unknown search provider: {provider_type}")


def create_inference_provider(
    provider_type: str = "huggingface",
    api_key: str = "",
    base_url: str | None = None,
    timeout: float = 30.0,
) -> ImageInferenceProvider:
    """Create an image inference provider instance.

    Args:
        provider_type: Type of provider ("huggingface")
        api_key: API token for the provider
        base_url: Optional API base URL override
        timeout: HTTP request timeout in seconds

    Returns:
        Configured ImageInferenceProvider instance

    Raises:
        ValueError: If provider_type is not recognized or api_key is empty

    """
    if provider_type == "huggingface":
        return HuggingFaceInference(
            api_key=api_key,
            base_url=base_url or "https://api-inference.huggingface.co",
            timeout=timeout,
        )
    else:
        raise ValueError(f"Unknown inference provider: {provider_type}")


__all__ = [
    "FILTERS",
    "ImageFilter",
    "ImageInferenceProvider",
    "ImageSearchProvider",
    "HuggingFaceInference",
    "UnsplashSearch",
    "create_inference_provider",
    "create_search_provider",
    "filter_choices",
    "resolve_filter",
]
