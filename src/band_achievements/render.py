"""Pure rendering of the display list.

Nothing here touches Streamlit: the page turns ``CardView`` objects into
widgets and uses the markup helpers for the HTML parts.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Sequence

from .grouping import StudentAggregate, tier_for_total
from .security import MISSING_CARD_FILENAME, card_filename, escape_html

FALLBACK_OPACITY = 0.9


@dataclass(frozen=True)
class ImageRef:
    src: str
    alt: str
    fallback: bool = False


@dataclass(frozen=True)
class CardView:
    name: str
    points: int
    tier: Optional[str]
    images: List[ImageRef]


def round_points(total: float) -> int:
    """Round half up, so 2.5 shows as 3 and -2.5 as -2."""
    return int(math.floor(total + 0.5))


def list_assets(asset_dir: Path) -> FrozenSet[str]:
    """Filenames of the image assets available for cards."""
    if not asset_dir.is_dir():
        return frozenset()
    return frozenset(path.name for path in asset_dir.iterdir() if path.is_file())


def resolve_image(label: str, available: FrozenSet[str], url_prefix: str) -> ImageRef:
    filename = card_filename(label)
    prefix = url_prefix.rstrip("/")
    if filename in available:
        return ImageRef(src=f"{prefix}/{filename}", alt=label)
    return ImageRef(src=f"{prefix}/{MISSING_CARD_FILENAME}", alt=label, fallback=True)


def build_card_views(students: Sequence[StudentAggregate], available: FrozenSet[str], url_prefix: str) -> List[CardView]:
    views = []
    for student in students:
        total = student.total
        views.append(
            CardView(
                name=student.name,
                points=round_points(total),
                tier=tier_for_total(total),
                images=[resolve_image(item.card, available, url_prefix) for item in student.items],
            )
        )
    return views


def image_html(image: ImageRef, css_class: str = "achievement-card") -> str:
    alt = escape_html(image.alt)
    style = f" style='opacity:{FALLBACK_OPACITY}'" if image.fallback else ""
    return f"<img class='{css_class}' src='{escape_html(image.src)}' alt='{alt}' title='{alt}'{style}>"


def card_html(view: CardView) -> str:
    classes = "student-card" + (f" glow-{view.tier}" if view.tier else "")
    images = "".join(image_html(image) for image in view.images)
    return (
        f"<div class='{classes}'>"
        f"<div class='student-name'>{escape_html(view.name)}</div>"
        "<div class='points'>"
        "<div class='label'>Achievement Points</div>"
        f"<div class='num'>{view.points}</div>"
        "</div>"
        f"<div class='cards-container'>{images}</div>"
        "</div>"
    )


def cards_html(views: Iterable[CardView]) -> str:
    return "".join(card_html(view) for view in views)


def error_html(message: str) -> str:
    return f"<p class='load-error'>Error loading sheet: {escape_html(message)}</p>"


def notice_html(message: str) -> str:
    return f"<p class='load-notice'>{escape_html(message)}</p>"
