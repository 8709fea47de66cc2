"""Application façade used by a presentation layer."""
import asyncio
import logging
from typing import Optional, Set

from suomiarena.models.base import init_db
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
    StartSession,
    SubmitAnswer,
)
from suomiarena.services.game_service import GameService
from suomiarena.services.persistence_service import PersistenceService
from suomiarena.services.progress_codec import export_times_csv, format_time


class GameController:
    """Holds the game state, dispatches actions and persists progress."""

    def __init__(
        self,
        game_service: Optional[GameService] = None,
        persistence: Optional[PersistenceService] = None,
    ):
        """Initialize the controller."""
        self.game_service = game_service or GameService()
        self.persistence = persistence
        self.state = GameState()
        self.running = False
        self._pending_saves: Set[asyncio.Task] = set()
        self.logger = logging.getLogger(__name__)

    async def start(self) -> None:
        """Load saved progress and get ready for play."""
        if self.running:
            return

        if self.persistence is None:
            init_db()
            self.persistence = PersistenceService()
            self.logger.info("Database initialized")

        progress = await self.persistence.load()
        if progress is not None:
            self.state = self.game_service.reduce(self.state, LoadState(progress))
        else:
            self.logger.info("No saved progress, starting fresh")
        self.running = True

    async def stop(self) -> None:
        """Wait for pending saves and release the HTTP client."""
        if not self.running:
            return
        await self.flush()
        if self.persistence is not None:
            await self.persistence.close()
        self.running = False
        self.logger.info("Game controller stopped")

    async def flush(self) -> None:
        """Wait until every scheduled save has finished."""
        while self._pending_saves:
            await asyncio.gather(*list(self._pending_saves))

    def dispatch(self, action: GameAction) -> GameState:
        """Reduce an action and save progress when the player record changed."""
        previous = self.state.player
        self.state = self.game_service.reduce(self.state, action)
        if self.state.player is not previous:
            self._schedule_save(self.state.player)
        return self.state

    def _schedule_save(self, progress: PlayerProgress) -> None:
        if self.persistence is None:
            return
        self.persistence.save_local(progress)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No event loop: the remote mirror is skipped
            return
        task = loop.create_task(self.persistence.push_remote(progress))
        self._pending_saves.add(task)
        task.add_done_callback(self._pending_saves.discard)

    def start_session(self, mode: GameMode, selection: Selection) -> bool:
        """Start a session; returns False when the selection has no items."""
        if not self.game_service.can_start(mode, selection):
            self.logger.warning(f"Nothing to practise for {mode.value} with topics {selection.topics}")
            return False
        self.dispatch(StartSession(mode, selection))
        return True

    def submit_answer(self, answer: str) -> Optional[FeedbackRecord]:
        """Submit an answer and return the resulting feedback, if any."""
        return self.dispatch(SubmitAnswer(answer)).feedback

    def next_item(self) -> GameState:
        return self.dispatch(Advance())

    def clear_feedback(self) -> GameState:
        return self.dispatch(ClearFeedback())

    def return_to_menu(self) -> GameState:
        return self.dispatch(ReturnToMenu())

    def reset_progress(self) -> None:
        """Forget all best times and topic completions."""
        if self.persistence is not None:
            self.persistence.reset()
        self.dispatch(LoadState(PlayerProgress()))
        self.logger.info("Progress reset")

    def export_times_csv(self) -> str:
        """Best times as a downloadable CSV table."""
        return export_times_csv(self.state.player.best_times)

    @staticmethod
    def format_time(ms: int) -> str:
        return format_time(ms)

    def is_topic_completed(self, mode: GameMode, selection: Selection) -> bool:
        return self.state.player.is_topic_completed(mode, selection.key)

    def summary(self):
        """Summary of the current session, once it is complete."""
        session = self.state.session
        if session is None or not session.is_complete:
            return None
        return self.game_service.session_service.summarize(session)
