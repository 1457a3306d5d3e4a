"""Encoding of list columns: comma-delimited tags, JSON image URL arrays."""

import json
import logging

logger = logging.getLogger(__name__)


def encode_tags(tags: list[str]) -> str:
    """Join tags with commas. Entries are trimmed, empty ones dropped."""
    return ",".join(t.strip() for t in tags if t and t.strip())


def decode_tags(value: str | None) -> list[str]:
    if not value:
        return []
    return [t.strip() for t in value.split(",") if t.strip()]


def encode_images(image_urls: list[str]) -> str:
    return json.dumps(list(image_urls), ensure_ascii=False)


def decode_images(value: str | None) -> list[str]:
    """Parse a JSON image URL array.

    A corrupt column never breaks the read path: malformed JSON or a non-list
    value is logged and decoded as an empty list.
    """
    if value is None:
        return []
    try:
        parsed = json.loads(value)
    except (TypeError, ValueError) as e:
        logger.warning("Corrupt image_urls column (%s): %.80r", e, value)
        return []
    if not isinstance(parsed, list):
        logger.warning("image_urls column is not a JSON array: %.80r", value)
        return []
    return [item if isinstance(item, str) else str(item) for item in parsed]
