"""
Tool dispatcher for the fetch-image and transform-image operations.

Validates arguments, calls the external providers, keeps the session store
current, and converts every ``SearchScapeError`` into an error result so no
single bad request can take the server down.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from loguru import logger
from pydantic import BaseModel, Field

from .errors import (
    ConfigurationError,
    PreconditionError,
    SearchScapeError,
    ToolValidationError,
)
from .providers import ImageInferenceProvider, ImageSearchProvider, resolve_filter
from .sessions import SessionStore

FETCH_IMAGE = "fetch-image"
TRANSFORM_IMAGE = "transform-image"


class ToolResult(BaseModel):
    """Textual outcome of a tool call."""

    text: str = Field(description="Message returned to the caller")
    is_error: bool = Field(default=False, description="True if the call failed")


class ToolDispatcher:
    """Runs tool operations against a session store and image providers.

    Providers are passed as zero-argument factories and only resolved once a
    request has passed validation, so a missing inference key does not stop
    fetch-image from working.
    """

    def __init__(
        self,
        session_store: SessionStore,
        search_provider: Callable[[], ImageSearchProvider],
        inference_provider: Callable[[], ImageInferenceProvider],
    ):
        self.session_store = session_store
        self._search_provider = search_provider
        self._inference_provider = inference_provider

    async def call(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
        """
        Dispatch a tool call by name.

        Args:
            name: Tool name ("fetch-image" or "transform-image")
            arguments: Tool arguments keyed by field name

        Returns:
            ToolResult with the confirmation or error message
        """
        arguments = arguments or {}
        if name == FETCH_IMAGE:
            return await self.fetch_image(
                prompt=arguments.get("prompt", ""),
                user_id=arguments.get("user_id", ""),
            )
        if name == TRANSFORM_IMAGE:
            return await self.transform_image(
                filter_name=arguments.get("filter", ""),
                user_id=arguments.get("user_id", ""),
            )
        logger.warning("Unknown tool requested: {}", name)
        return ToolResult(text=f"Error: Unknown tool: {name}", is_error=True)

    async def fetch_image(self, prompt: str, user_id: str) -> ToolResult:
        """Fetch an image for a prompt and remember it for the user."""
        return await self._run("fetching image", self._fetch_image, prompt, user_id)

    async def transform_image(self, filter_name: str, user_id: str) -> ToolResult:
        """Apply a filter to the user's most recently fetched image."""
        return await self._run("transforming image", self._transform_image, filter_name, user_id)

    async def _run(
        self,
        action: str,
        operation: Callable[..., Awaitable[str]],
        *args: str,
    ) -> ToolResult:
        try:
            text = await operation(*args)
        except SearchScapeError as e:
            logger.error("Error {} ({}): {}", action, e.kind, e)
            return ToolResult(text=f"Error: {e}", is_error=True)
        return ToolResult(text=text)

    async def _fetch_image(self, prompt: str, user_id: str) -> str:
        _require_str(prompt=prompt, user_id=user_id)
        if not user_id:
            raise ToolValidationError("UserId is required to track the sessions")
        if not prompt:
            raise ToolValidationError("Prompt is missing")

        search_provider = _resolve(self._search_provider)
        image_url = await search_provider.search(prompt)
        self.session_store.set(user_id, image_url)

        logger.info("Fetched {} image for user {}: {}", search_provider.name, user_id, image_url)
        return f"Image fetched successfully! Image URL: {image_url}"

    async def _transform_image(self, filter_name: str, user_id: str) -> str:
        _require_str(filter=filter_name, user_id=user_id)
        if not user_id:
            raise ToolValidationError("UserId is required to track the sessions")
        if not filter_name:
            raise ToolValidationError("Filter type is missing")

        image_url = self.session_store.get(user_id)
        if not image_url:
            raise PreconditionError(
                "No image found. Please fetch an image first using fetch-image"
            )

        image_filter = resolve_filter(filter_name)
        inference_provider = _resolve(self._inference_provider)
        logger.info("Applying filter '{}' to image for user {}", image_filter.name, user_id)
        logger.debug("Image URL sent to {}: {}", inference_provider.name, image_url)

        transformed_url = await inference_provider.transform(image_filter, image_url)

        logger.info("Transformed image URL for user {}: {}", user_id, transformed_url)
        return (
            f"Image transformed with {filter_name} filter successfully! "
            f"Transformed image URL: {transformed_url}"
        )


def _resolve(factory: Callable[[], Any]) -> Any:
    try:
        return factory()
    except ValueError as e:
        raise ConfigurationError(str(e)) from e


def _require_str(**arguments: Any) -> None:
    for field, value in arguments.items():
        if value is not None and not isinstance(value, str):
            raise ToolValidationError(f"Argument '{field}' must be a string")
