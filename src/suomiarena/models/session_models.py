"""Models for practice sessions, feedback and player progress."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from suomiarena.models.content_models import PracticeItem


class GameMode(Enum):
    """Available game modes."""
    MENU = "menu"
    VOCABULARY_RECALL = "vocabulary-recall"  # Finnish -> English
    VOCABULARY_ACTIVE_RECALL = "vocabulary-active-recall"  # English -> Finnish
    VOCABULARY_MEMORISE = "vocabulary-memorise"  # English -> Finnish, escalating repeats
    CASES_FILL_BLANK = "cases-fill-blank"
    CASES_FILL_BLANK_PLURAL = "cases-fill-blank-plural"
    VERB_TYPE_PRESENT = "verb-type-present"
    VERB_TYPE_NEGATIVE = "verb-type-negative"
    VERB_TYPE_IMPERFECT = "verb-type-imperfect"
    VERB_TYPE_IMPERFECT_NEGATIVE = "verb-type-imperfect-negative"
    VERB_TYPE_IMPERATIVE = "verb-type-imperative"
    VERB_TYPE_IMPERATIVE_NEGATIVE = "verb-type-imperative-negative"
    VERB_TYPE_CONDITIONAL = "verb-type-conditional"
    VERB_TYPE_CONDITIONAL_NEGATIVE = "verb-type-conditional-negative"
    VERB_TYPE_CONDITIONAL_PERFECT = "verb-type-conditional-perfect"
    VERB_TYPE_CONDITIONAL_PERFECT_NEGATIVE = "verb-type-conditional-perfect-negative"
    PARTITIVE = "partitive"
    PARTITIVE_PLURAL = "partitive-plural"
    PLURAL = "plural"
    GENITIVE = "genitive"
    GENITIVE_PLURAL = "genitive-plural"
    PIKKUSANAT = "pikkusanat"
    LYRICS = "lyrics"
    QUESTION_WORDS = "question-words"


@dataclass(frozen=True)
class Selection:
    """Topics picked in the menu (verb types, rules, chapters, song ids...)."""
    topics: Tuple[str, ...] = ()

    @classmethod
    def of(cls, *topics: Any) -> "Selection":
        return cls(tuple(str(topic) for topic in topics))

    @property
    def key(self) -> str:
        """Topic key: de-duplicated, sorted, '+'-joined."""
        return "+".join(sorted(set(self.topics)))

    def __bool__(self) -> bool:
        return bool(self.topics)


@dataclass(frozen=True)
class Prompt:
    """Per-question fields chosen when an item becomes current."""
    text: str
    person: Optional[str] = None
    tense: Optional[str] = None
    hint: Optional[str] = None


@dataclass(frozen=True)
class ItemState:
    """Session progress of one practice item."""
    item: PracticeItem
    correct_count: int = 0
    wrong_count: int = 0
    eliminated: bool = False
    required_correct: int = 1


@dataclass(frozen=True)
class Session:
    """State of a single playthrough."""
    mode: GameMode
    items: Tuple[ItemState, ...]
    current_index: Optional[int]
    start_time: Optional[datetime]
    end_time: Optional[datetime] = None
    wrong_count: int = 0
    is_complete: bool = False
    selection: Selection = field(default_factory=Selection)
    topic_key: str = ""

    @property
    def current(self) -> Optional[ItemState]:
        if self.current_index is None:
            return None
        return self.items[self.current_index]


@dataclass(frozen=True)
class SessionSummary:
    """Figures shown on the results screen and stored as a best time."""
    time_ms: int
    accuracy: int
    total_attempts: int
    wrong_count: int
    item_count: int

    @property
    def is_perfect(self) -> bool:
        return self.wrong_count == 0


@dataclass(frozen=True)
class FeedbackRecord:
    """Result of one submitted answer."""
    is_correct: bool
    user_answer: str
    correct_answer: str
    details: Dict[str, Any] = field(default_factory=dict, hash=False, compare=False)


@dataclass(frozen=True)
class TimeRecord:
    """Best time for one (mode, topic) pair."""
    mode: GameMode
    topic_key: str
    time_ms: int
    date: str
    accuracy: int
    item_count: int


@dataclass(frozen=True)
class TopicProgress:
    """Completion flag for one (mode, topic) pair."""
    mode: GameMode
    topic_key: str
    completed: bool
    date: str = ""


@dataclass(frozen=True)
class PlayerProgress:
    """Player's persistent state."""
    best_times: Tuple[TimeRecord, ...] = ()
    topic_progress: Tuple[TopicProgress, ...] = ()

    def best_time_for(self, mode: GameMode, topic_key: str) -> Optional[TimeRecord]:
        """Return the stored best time for a mode and topic."""
        for record in self.best_times:
            if record.mode == mode and record.topic_key == topic_key:
                return record
        return None

    def is_topic_completed(self, mode: GameMode, topic_key: str) -> bool:
        """Check whether a topic was finished perfectly in a mode."""
        return any(
            p.completed for p in self.topic_progress
            if p.mode == mode and p.topic_key == topic_key
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serialisable dict."""
        return {
            "bestTimes": [
                {
                    "mode": r.mode.value,
                    "topicKey": r.topic_key,
                    "timeMs": r.time_ms,
                    "date": r.date,
                    "accuracy": r.accuracy,
                    "itemCount": r.item_count,
                }
                for r in self.best_times
            ],
            "topicProgress": [
                {
                    "mode": p.mode.value,
                    "topicKey": p.topic_key,
                    "completed": p.completed,
                    "date": p.date,
                }
                for p in self.topic_progress
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerProgress":
        """Create an instance from a dict produced by to_dict.

        Raises ValueError (or KeyError/TypeError) on malformed data.
        """
        best_times = data.get("bestTimes")
        topic_progress = data.get("topicProgress")
        if not isinstance(best_times, list) or not isinstance(topic_progress, list):
            raise ValueError("bestTimes and topicProgress must be lists")
        return cls(
            best_times=tuple(
                TimeRecord(
                    mode=GameMode(r["mode"]),
                    topic_key=str(r["topicKey"]),
                    time_ms=int(r["timeMs"]),
                    date=str(r.get("date", "")),
                    accuracy=int(r.get("accuracy", 0)),
                    item_count=int(r.get("itemCount", 0)),
                )
                for r in best_times
            ),
            topic_progress=tuple(
                TopicProgress(
                    mode=GameMode(p["mode"]),
                    topic_key=str(p["topicKey"]),
                    completed=bool(p["completed"]),
                    date=str(p.get("date", "")),
                )
                for p in topic_progress
            ),
        )


def same_progress(a: PlayerProgress, b: PlayerProgress) -> bool:
    """Order-independent equality of two progress records."""
    return set(a.best_times) == set(b.best_times) and set(a.topic_progress) == set(b.topic_progress)


@dataclass(frozen=True)
class GameState:
    """Full game state."""
    mode: GameMode = GameMode.MENU
    player: PlayerProgress = field(default_factory=PlayerProgress)
    session: Optional[Session] = None
    current_item: Optional[PracticeItem] = None
    prompt: Optional[Prompt] = None
    feedback: Optional[FeedbackRecord] = None


# Actions

@dataclass(frozen=True)
class StartSession:
    mode: GameMode
    selection: Selection


@dataclass(frozen=True)
class SubmitAnswer:
    answer: str


@dataclass(frozen=True)
class Advance:
    pass


@dataclass(frozen=True)
class ClearFeedback:
    pass


@dataclass(frozen=True)
class ReturnToMenu:
    pass


@dataclass(frozen=True)
class LoadState:
    progress: PlayerProgress


GameAction = Union[StartSession, SubmitAnswer, Advance, ClearFeedback, ReturnToMenu, LoadState]


def replace_record(records: Iterable[Any], new: Any, same: Any) -> Tuple[Any, ...]:
    """Return records with the first one matching `same` replaced by `new` (or `new` appended)."""
    result = list(records)
    for i, record in enumerate(result):
        if same(record):
            result[i] = new
            return tuple(result)
    result.append(new)
    return tuple(result)


def merge_progress(base: PlayerProgress, other: PlayerProgress) -> PlayerProgress:
    """Combine two progress records.

    The faster time wins for each (mode, topic key) and a topic stays
    completed once either side has completed it. Records only in `base`
    keep their position.
    """
    best_times = base.best_times
    for record in other.best_times:
        current = next(
            (r for r in best_times if r.mode == record.mode and r.topic_key == record.topic_key),
            None,
        )
        if current is None or record.time_ms < current.time_ms:
            best_times = replace_record(
                best_times,
                record,
                lambda r: r.mode == record.mode and r.topic_key == record.topic_key,
            )

    topic_progress = base.topic_progress
    for progress in other.topic_progress:
        current = next(
            (p for p in topic_progress if p.mode == progress.mode and p.topic_key == progress.topic_key),
            None,
        )
        if current is None or (progress.completed and not current.completed):
            topic_progress = replace_record(
                topic_progress,
                progress,
                lambda p: p.mode == progress.mode and p.topic_key == progress.topic_key,
            )
    return PlayerProgress(best_times=best_times, topic_progress=topic_progress)
