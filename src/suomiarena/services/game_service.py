"""Game service: the reducer that drives a practice session."""
import logging
import random
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from suomiarena.models.session_models import (
    Advance,
    ClearFeedback,
    FeedbackRecord,
    GameAction,
    GameMode,
    GameState,
    LoadState,
    PlayerProgress,
    ReturnToMenu,
    Selection,
    Session,
    StartSession,
    SubmitAnswer,
    TimeRecord,
    TopicProgress,
    replace_record,
)
from suomiarena.monitoring import (
    answers_submitted,
    perfect_completions,
    session_duration,
    sessions_completed,
    sessions_started,
)
from suomiarena.services.game_modes import BaseGameMode, get_game_mode
from suomiarena.services.session_service import SessionService

logger = logging.getLogger(__name__)


class GameService:
    """Service turning game actions into new game states."""

    def __init__(
        self,
        session_service: Optional[SessionService] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the service; rng and clock are used when no session service is given."""
        self.session_service = session_service or SessionService(rng=rng, clock=clock)

    @property
    def rng(self) -> random.Random:
        return self.session_service.rng

    def can_start(self, mode: GameMode, selection: Selection) -> bool:
        """Check whether a selection yields a non-empty item pool."""
        if mode == GameMode.MENU:
            return False
        return bool(get_game_mode(mode).build_pool(selection))

    def reduce(self, state: GameState, action: GameAction) -> GameState:
        """Apply an action to a state and return the new state."""
        if isinstance(action, StartSession):
            return self._start_session(state, action)
        if isinstance(action, SubmitAnswer):
            return self._submit_answer(state, action)
        if isinstance(action, Advance):
            return self._advance(state)
        if isinstance(action, ClearFeedback):
            return replace(state, feedback=None)
        if isinstance(action, ReturnToMenu):
            return replace(
                state,
                mode=GameMode.MENU,
                session=None,
                current_item=None,
                prompt=None,
                feedback=None,
            )
        if isinstance(action, LoadState):
            logger.info(
                f"Loaded progress: {len(action.progress.best_times)} best times, "
                f"{len(action.progress.topic_progress)} topic records"
            )
            return replace(state, player=action.progress)
        raise ValueError(f"Unknown action: {action!r}")

    def _start_session(self, state: GameState, action: StartSession) -> GameState:
        game_mode = get_game_mode(action.mode)
        pool = game_mode.build_pool(action.selection)
        if not pool:
            raise ValueError(f"No items for {action.mode.value} with topics {action.selection.topics}")

        session = self.session_service.create_session(
            action.mode,
            pool,
            selection=action.selection,
            topic_key=game_mode.topic_key(action.selection),
        )
        item = session.current.item
        sessions_started.labels(mode=action.mode.value).inc()
        return replace(
            state,
            mode=action.mode,
            session=session,
            current_item=item,
            prompt=game_mode.make_prompt(item, self.rng),
            feedback=None,
        )

    def _submit_answer(self, state: GameState, action: SubmitAnswer) -> GameState:
        session = state.session
        if session is None or session.is_complete or session.current is None:
            return state
        if state.feedback is not None or not action.answer.strip():
            return state

        game_mode = get_game_mode(session.mode)
        item = session.current.item
        is_correct = game_mode.check_answer(item, state.prompt, action.answer)
        session = self.session_service.record_result(
            session,
            session.current_index,
            is_correct,
            max_required=game_mode.max_required_correct,
        )
        answers_submitted.labels(mode=session.mode.value, result="correct" if is_correct else "wrong").inc()

        feedback = FeedbackRecord(
            is_correct=is_correct,
            user_answer=action.answer,
            correct_answer=game_mode.expected_answer(item, state.prompt),
            details=game_mode.feedback_details(item, state.prompt),
        )
        player = state.player
        if session.is_complete:
            player = self._record_completion(player, session, game_mode)
        return replace(state, session=session, feedback=feedback, player=player)

    def _advance(self, state: GameState) -> GameState:
        session = state.session
        if state.feedback is None or session is None:
            return state
        if session.is_complete:
            return replace(state, feedback=None)

        next_index = self.session_service.next_active_index(session, session.current_index + 1)
        session = replace(session, current_index=next_index)
        item = session.current.item
        return replace(
            state,
            session=session,
            current_item=item,
            prompt=get_game_mode(session.mode).make_prompt(item, self.rng),
            feedback=None,
        )

    def _record_completion(self, player: PlayerProgress, session: Session, game_mode: BaseGameMode) -> PlayerProgress:
        """Update best times and topic completion after the last item is eliminated."""
        summary = self.session_service.summarize(session)
        date = session.end_time.date().isoformat()
        mode = session.mode.value
        sessions_completed.labels(mode=mode).inc()
        session_duration.labels(mode=mode).observe(summary.time_ms / 1000)
        logger.info(
            f"Completed {mode} ({session.topic_key}) in {summary.time_ms} ms, "
            f"accuracy {summary.accuracy}%, {summary.wrong_count} wrong"
        )

        if game_mode.tracks_best_time:
            previous = player.best_time_for(session.mode, session.topic_key)
            if previous is None or summary.time_ms < previous.time_ms:
                record = TimeRecord(
                    mode=session.mode,
                    topic_key=session.topic_key,
                    time_ms=summary.time_ms,
                    date=date,
                    accuracy=summary.accuracy,
                    item_count=summary.item_count,
                )
                player = replace(
                    player,
                    best_times=replace_record(
                        player.best_times,
                        record,
                        lambda r: r.mode == session.mode and r.topic_key == session.topic_key,
                    ),
                )
                logger.info(f"New best time for {mode} ({session.topic_key}): {summary.time_ms} ms")

        if summary.is_perfect:
            perfect_completions.labels(mode=mode).inc()
            if game_mode.tracks_completion:
                progress = TopicProgress(
                    mode=session.mode,
                    topic_key=session.topic_key,
                    completed=True,
                    date=date,
                )
                player = replace(
                    player,
                    topic_progress=replace_record(
                        player.topic_progress,
                        progress,
                        lambda p: p.mode == session.mode and p.topic_key == session.topic_key,
                    ),
                )
        return player
