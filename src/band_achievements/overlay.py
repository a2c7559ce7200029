"""Zoom overlay state machine.

The overlay is either closed or open on one image. Every user action reaches
``transition`` as an event; the function returns the next state and never
mutates its input.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

DISMISS_KEY = "Escape"


@dataclass(frozen=True)
class OverlayState:
    src: Optional[str] = None
    alt: str = ""

    @property
    def is_open(self) -> bool:
        return self.src is not None


CLOSED = OverlayState()


@dataclass(frozen=True)
class ImageActivated:
    src: str
    alt: str
    generation: int


@dataclass(frozen=True)
class ZoomImageActivated:
    pass


@dataclass(frozen=True)
class BackgroundActivated:
    pass


@dataclass(frozen=True)
class KeyPressed:
    key: str


@dataclass(frozen=True)
class OutsideActivated:
    pass


OverlayEvent = Union[ImageActivated, ZoomImageActivated, BackgroundActivated, KeyPressed, OutsideActivated]


def transition(state: OverlayState, event: OverlayEvent) -> OverlayState:
    if isinstance(event, ImageActivated):
        return OverlayState(src=event.src, alt=event.alt or "")
    if not state.is_open:
        return state
    if isinstance(event, (BackgroundActivated, OutsideActivated)):
        return CLOSED
    if isinstance(event, KeyPressed) and event.key == DISMISS_KEY:
        return CLOSED
    # Clicks on the zoomed image and any other key leave it open.
    return state
