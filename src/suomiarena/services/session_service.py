"""Service for creating and advancing practice sessions."""
import logging
import random
from dataclasses import replace
from datetime import datetime, timedelta, UTC
from typing import Callable, Optional, Sequence

from suomiarena.models.content_models import PracticeItem
from suomiarena.models.session_models import (
    GameMode,
    ItemState,
    Selection,
    Session,
    SessionSummary,
)

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class SessionService:
    """Service for managing the item pool of a single session.

    Every method returns new objects; sessions are never mutated in place.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the service with a random source and a clock."""
        self.rng = rng or random.Random()
        self.clock = clock or _utc_now

    def create_session(
        self,
        mode: GameMode,
        item_pool: Sequence[PracticeItem],
        selection: Optional[Selection] = None,
        topic_key: str = "",
    ) -> Session:
        """Create a session over a shuffled copy of the item pool."""
        if not item_pool:
            raise ValueError(f"Cannot create a {mode.value} session from an empty item pool")

        items = list(item_pool)
        self.rng.shuffle(items)
        session = Session(
            mode=mode,
            items=tuple(ItemState(item=item) for item in items),
            current_index=None,
            start_time=self.clock(),
            selection=selection or Selection(),
            topic_key=topic_key,
        )
        session = replace(session, current_index=self.next_active_index(session, 0))
        logger.info(f"Created {mode.value} session with {len(items)} items (topic: {topic_key or '-'})")
        return session

    @staticmethod
    def next_active_index(session: Session, from_index: int) -> Optional[int]:
        """Find the next non-eliminated item, scanning circularly from from_index.

        Returns None when every item is eliminated.
        """
        count = len(session.items)
        if count == 0:
            return None
        for offset in range(count):
            index = (from_index + offset) % count
            if not session.items[index].eliminated:
                return index
        return None

    @staticmethod
    def active_count(session: Session) -> int:
        """Count items that are not yet eliminated."""
        return sum(1 for state in session.items if not state.eliminated)

    def record_result(
        self,
        session: Session,
        index: int,
        is_correct: bool,
        max_required: int = 1,
    ) -> Session:
        """Record an answer for the item at index.

        A correct answer eliminates the item once its correct count reaches
        the required count. A wrong answer never eliminates; with
        max_required above 1 it also raises the required count by one.
        """
        if not 0 <= index < len(session.items):
            raise ValueError(f"Item index {index} out of range (0..{len(session.items) - 1})")
        state = session.items[index]
        if state.eliminated:
            raise ValueError(f"Item at index {index} is already eliminated")

        wrong_count = session.wrong_count
        if is_correct:
            correct_count = state.correct_count + 1
            state = replace(
                state,
                correct_count=correct_count,
                eliminated=correct_count >= state.required_correct,
            )
        else:
            required_correct = state.required_correct
            if max_required > 1:
                required_correct = min(required_correct + 1, max_required)
            state = replace(
                state,
                wrong_count=state.wrong_count + 1,
                required_correct=required_correct,
            )
            wrong_count += 1

        items = session.items[:index] + (state,) + session.items[index + 1:]
        session = replace(session, items=items, wrong_count=wrong_count)

        if self.active_count(session) == 0:
            session = replace(session, is_complete=True, end_time=self.clock())
            logger.info(f"Session {session.mode.value} complete with {wrong_count} wrong answers")
        return session

    @staticmethod
    def summarize(session: Session) -> SessionSummary:
        """Compute time, accuracy and attempt totals for a session."""
        total_attempts = sum(s.correct_count + s.wrong_count for s in session.items)
        if total_attempts:
            # round half up, in integers
            accuracy = (200 * (total_attempts - session.wrong_count) + total_attempts) // (2 * total_attempts)
        else:
            accuracy = 0
        if session.start_time and session.end_time:
            time_ms = (session.end_time - session.start_time) // timedelta(milliseconds=1)
        else:
            time_ms = 0
        return SessionSummary(
            time_ms=time_ms,
            accuracy=accuracy,
            total_attempts=total_attempts,
            wrong_count=session.wrong_count,
            item_count=len(session.items),
        )
