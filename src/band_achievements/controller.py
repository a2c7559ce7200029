"""Application state and the single event dispatcher behind the page."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List

from .grouping import StudentAggregate
from .io import SheetFetchError, load_students
from .overlay import CLOSED, ImageActivated, OverlayEvent, OverlayState, transition
from .views import SORT_MODES, SORT_POINTS, filter_and_sort

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data rows found in sheet."


class LoadStatus(str, Enum):
    IDLE = "idle"
    READY = "ready"
    NO_DATA = "no_data"
    ERROR = "error"


@dataclass
class AppState:
    students: List[StudentAggregate] = field(default_factory=list)
    search: str = ""
    sort: str = SORT_POINTS
    overlay: OverlayState = CLOSED
    status: LoadStatus = LoadStatus.IDLE
    message: str = ""
    generation: int = 0


class AchievementsController:
    """Owns the AppState; the page only reads it and sends events.

    Student data changes only when a load completes, so filtering during or
    after a failed load always sees the last good list.
    """

    def __init__(self, state: AppState | None = None):
        self.state = state or AppState()

    def load(self, fetch: Callable[[], str]) -> LoadStatus:
        try:
            text = fetch()
        except SheetFetchError as exc:
            logger.warning("Sheet load failed: %s", exc)
            self.state.status = LoadStatus.ERROR
            self.state.message = str(exc)
            return self.state.status

        students = load_students(text)
        self.state.students = students
        if students:
            self.state.status = LoadStatus.READY
            self.state.message = ""
        else:
            self.state.status = LoadStatus.NO_DATA
            self.state.message = NO_DATA_MESSAGE
        return self.state.status

    def set_search(self, search: str) -> None:
        self.state.search = search or ""

    def set_sort(self, sort: str) -> None:
        self.state.sort = sort if sort in SORT_MODES else SORT_POINTS

    def display_list(self) -> List[StudentAggregate]:
        return filter_and_sort(self.state.students, self.state.search, self.state.sort)

    def next_generation(self) -> int:
        """Start a new render; events bound to earlier renders become stale."""
        self.state.generation += 1
        return self.state.generation

    def dispatch(self, event: OverlayEvent) -> OverlayState:
        if isinstance(event, ImageActivated) and event.generation != self.state.generation:
            logger.debug("Dropping image activation from render %d (current %d)", event.generation, self.state.generation)
            return self.state.overlay
        self.state.overlay = transition(self.state.overlay, event)
        return self.state.overlay
