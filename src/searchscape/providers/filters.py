"""Dispatch table of the image filters supported by transform-image.

Each filter names the inference model to call and how to build its request
body. ``cartoon`` is accepted as an alias of ``translate``.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..errors import ToolValidationError

CARTOON_INSTRUCTION = "make it look like a cartoon"


def _plain_payload(image_url: str) -> dict[str, Any]:
    return {"inputs": image_url}


def _instruction_payload(image_url: str) -> dict[str, Any]:
    return {"inputs": {"image": image_url, "prompt": CARTOON_INSTRUCTION}}


@dataclass(frozen=True)
class ImageFilter:
    """A named transformation backed by one inference model."""

    name: str
    model: str
    label: str
    build_payload: Callable[[str], dict[str, Any]]


FILTERS: dict[str, ImageFilter] = {
    f.name: f
    for f in (
        ImageFilter(
            name="artistic",
            model="lambdalabs/sd-style-transfer",
            label="Artistic transformation",
            build_payload=_plain_payload,
        ),
        ImageFilter(
            name="enhance",
            model="eugenesiow/super-image",
            label="Image enhancement",
            build_payload=_plain_payload,
        ),
        ImageFilter(
            name="translate",
            model="timbrooks/instruct-pix2pix",
            label="Image translation",
            build_payload=_instruction_payload,
        ),
    )
}

FILTER_ALIASES: dict[str, str] = {"cartoon": "translate"}


def filter_choices() -> str:
    """Return the valid filter names as an English list ("a, b, or c")."""
    names = list(FILTERS)
    return ", ".join(names[:-1]) + f", or {names[-1]}"


def resolve_filter(name: str) -> ImageFilter:
    """
    Look up a filter by name, case-insensitively.

    Args:
        name: Filter name or alias supplied by the caller

    Returns:
        The matching ImageFilter

    Raises:
        ToolValidationError: If the name matches no filter or alias
    """
    key = name.strip().lower()
    key = FILTER_ALIASES.get(key, key)
    if key not in FILTERS:
        raise ToolValidationError(f"Invalid filter. Please choose: {filter_choices()}")
    return FILTERS[key]
