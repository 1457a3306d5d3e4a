"""Tag tallies derived from the photo sets' tag columns.

Tags have no table of their own: every operation here scans the encoded
``PhotoSet.tags`` column.
"""

import logging
from collections import Counter
from datetime import datetime, timezone

from sqlmodel import Session, col, select

from gallery.models.photoset import PhotoSet
from gallery.schemas.tag import TagResponse
from gallery.utils.codec import decode_tags, encode_tags

logger = logging.getLogger(__name__)


def get_all_tags(session: Session) -> list[TagResponse]:
    """Every tag used by a published photo set, with the number of sets using it.

    Sorted by count (descending), then name.
    """
    rows = session.exec(
        select(PhotoSet.tags).where(
            PhotoSet.status == "published",
            col(PhotoSet.tags).is_not(None),
            PhotoSet.tags != "",
        )
    ).all()

    counts: Counter[str] = Counter()
    for value in rows:
        counts.update(set(decode_tags(value)))

    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [TagResponse(name=name, count=count) for name, count in ranked]


def get_popular_tags(session: Session, limit: int = 20) -> list[TagResponse]:
    return get_all_tags(session)[:limit]


def delete_tag(name: str, session: Session) -> int:
    """Remove a tag from every photo set carrying it. Returns the number of sets changed."""
    tag = name.strip()
    if not tag:
        return 0

    candidates = session.exec(
        select(PhotoSet).where(col(PhotoSet.tags).contains(tag, autoescape=True))
    ).all()

    now = datetime.now(timezone.utc)
    updated = 0
    for photoset in candidates:
        tags = decode_tags(photoset.tags)
        kept = [t for t in tags if t != tag]
        if len(kept) == len(tags):
            continue  # substring hit only, e.g. "sea" inside "seaside"
        photoset.tags = encode_tags(kept) or None
        photoset.updated_at = now
        session.add(photoset)
        updated += 1

    session.commit()
    logger.info("Removed tag %r from %d photo set(s)", tag, updated)
    return updated
