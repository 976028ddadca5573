"""
FastMCP server for SearchScape.

Exposes two tools: fetch-image finds an Unsplash photo for a prompt and
remembers it for the user, and transform-image runs a Hugging Face model over
that photo. Also exposes a placeholder image resource.
"""

from typing import Annotated

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from loguru import logger
from pydantic import Field

from . import __version__
from .config import settings
from .dispatcher import FETCH_IMAGE, TRANSFORM_IMAGE, ToolDispatcher
from .providers import (
    ImageInferenceProvider,
    ImageSearchProvider,
    create_inference_provider,
    create_search_provider,
    filter_choices,
)
from .sessions import SessionStore, create_session_store

IMAGES_RESOURCE_URI = "searchscape://images"

# Initialize components lazily (on first tool call)
_session_store = None
_search_provider = None
_inference_provider = None
_dispatcher = None


def get_session_store() -> SessionStore:
    """Get or create the session store."""
    global _session_store
    if _session_store is None:
        logger.debug("Initializing session store: {}", settings.session_store_type)
        _session_store = create_session_store(settings.session_store_type)
    return _session_store


def get_search_provider() -> ImageSearchProvider:
    """Get or create the image search provider."""
    global _search_provider
    if _search_provider is None:
        logger.debug("Initializing search provider at {}", settings.unsplash_api_url)
        _search_provider = create_search_provider(
            provider_type="unsplash",
            api_key=settings.unsplash_access_key,
            base_url=settings.unsplash_api_url,
            timeout=settings.http_timeout,
        )
        logger.info("Search provider initialized successfully")
    return _search_provider


def get_inference_provider() -> ImageInferenceProvider:
    """Get or create the image inference provider."""
    global _inference_provider
    if _inference_provider is None:
        logger.debug("Initializing inference provider at {}", settings.hf_inference_url)
        _inference_provider = create_inference_provider(
            provider_type="huggingface",
            api_key=settings.hugging_face_api_key,
            base_url=settings.hf_inference_url,
            timeout=settings.http_timeout,
        )
        logger.info("Inference provider initialized successfully")
    return _inference_provider


def get_dispatcher() -> ToolDispatcher:
    """Get or create the tool dispatcher."""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = ToolDispatcher(
            session_store=get_session_store(),
            search_provider=get_search_provider,
            inference_provider=get_inference_provider,
        )
    return _dispatcher


async def _dispatch(name: str, **arguments: str) -> str:
    result = await get_dispatcher().call(name, arguments)
    if result.is_error:
        # FastMCP reports ToolError messages verbatim with isError set
        raise ToolError(result.text)
    return result.text


# Create MCP server
mcp = FastMCP(
    name="searchscape",
    version=__version__,
    instructions=(
        "Fetch photos from Unsplash and transform them with Hugging Face models. "
        "Call fetch-image first with a prompt and a user ID, then call "
        "transform-image with the same user ID to filter the fetched image."
    ),
)


@mcp.tool(name=FETCH_IMAGE)
async def fetch_image(
    prompt: Annotated[str, Field(description="Describe the image to fetch")],
    user_id: Annotated[str, Field(description="User session ID")],
) -> str:
    """Fetch an image from Unsplash based on a user's prompt.

    The image URL is remembered for the user so transform-image can use it.
    """
    logger.info("Fetch request: prompt='{}', user_id={}", prompt[:50], user_id)
    return await _dispatch(FETCH_IMAGE, prompt=prompt, user_id=user_id)


@mcp.tool(
    name=TRANSFORM_IMAGE,
    description=(
        "Apply a visual transformation to the user's last fetched image "
        f"({filter_choices()}; 'cartoon' is accepted as an alias of translate)"
    ),
)
async def transform_image(
    filter: Annotated[
        str,
        Field(description=f"Type of filter ({filter_choices()})"),
    ],
    user_id: Annotated[str, Field(description="User session ID")],
) -> str:
    logger.info("Transform request: filter='{}', user_id={}", filter, user_id)
    return await _dispatch(TRANSFORM_IMAGE, filter=filter, user_id=user_id)


@mcp.resource(
    IMAGES_RESOURCE_URI,
    name="Fetched and Transformed Images",
    mime_type="image/jpeg",
)
def images_resource() -> bytes:
    """Placeholder for fetched and transformed images; always empty."""
    return b""


# Export for uvicorn
def create_app():
    """Create the MCP application for deployment."""
    return mcp


# For SSE transport
def create_sse_app():
    """Create the SSE transport app."""
    return mcp.http_app(transport="sse")
