"""Abstract base classes for the external image providers.

Enables swapping Unsplash or Hugging Face for other search or inference
backends without touching the tool dispatcher.
"""

from abc import ABC, abstractmethod

from .filters import ImageFilter


class ImageSearchProvider(ABC):
    """Abstract interface for image search providers."""

    @abstractmethod
    async def search(self, query: str) -> str:
        """Find an image matching a text query.

        Args:
            query: Natural language description of the image

        Returns:
            URL of the matching image

        Raises:
            UpstreamError: If the provider fails or returns a malformed payload

        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a human-readable provider name."""
        pass


class ImageInferenceProvider(ABC):
    """Abstract interface for image transformation providers."""

    @abstractmethod
    async def transform(self, image_filter: ImageFilter, image_url: str) -> str:
        """Apply a filter to an image.

        Args:
            image_filter: Resolved filter describing the model and request shape
            image_url: URL of the source image

        Returns:
            Reference to the generated image

        Raises:
            UpstreamError: If the provider fails or returns no output image

        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a human-readable provider name."""
        pass
