"""Tests for session service."""
import random
from dataclasses import replace
from typing import List

import pytest
from faker import Faker

from suomiarena.models.content_models import VocabularyWord
from suomiarena.models.session_models import GameMode, Selection, Session
from suomiarena.services.session_service import SessionService

fake = Faker()


@pytest.fixture
def session_service(rng, clock) -> SessionService:
    """Create a session service with a seeded rng and a fake clock."""
    return SessionService(rng=rng, clock=clock)


@pytest.fixture
def words() -> List[VocabularyWord]:
    """Create distinct test words."""
    return [VocabularyWord(finnish=fake.unique.word(), english=fake.word()) for _ in range(5)]


def eliminate(session_service: SessionService, session: Session, index: int) -> Session:
    return session_service.record_result(session, index, True)


def test_create_session(session_service: SessionService, words, clock):
    """Test that a new session holds every item once, fresh and active."""
    session = session_service.create_session(
        GameMode.VOCABULARY_RECALL, words, selection=Selection.of("1a"), topic_key="1a"
    )

    assert sorted(s.item.finnish for s in session.items) == sorted(w.finnish for w in words)
    assert all(s.correct_count == 0 and s.wrong_count == 0 and not s.eliminated for s in session.items)
    assert session.current_index == 0
    assert session.start_time == clock.now
    assert session.end_time is None
    assert not session.is_complete
    assert session.wrong_count == 0
    assert session.topic_key == "1a"
    assert session.selection == Selection.of("1a")


def test_create_session_shuffles(words, clock):
    """Test that the pool order comes from the random source."""
    orders = {
        tuple(s.item.finnish for s in SessionService(rng=random.Random(seed), clock=clock)
              .create_session(GameMode.VOCABULARY_RECALL, words).items)
        for seed in range(20)
    }
    assert len(orders) > 1


def test_create_session_empty_pool(session_service: SessionService):
    """Test that an empty pool is rejected."""
    with pytest.raises(ValueError):
        session_service.create_session(GameMode.VOCABULARY_RECALL, [])


def test_next_active_index_wraps(session_service: SessionService, words):
    """Test the circular scan for the next active item."""
    session = session_service.create_session(GameMode.VOCABULARY_RECALL, words)
    session = eliminate(session_service, session, 3)
    session = eliminate(session_service, session, 4)

    assert session_service.next_active_index(session, 3) == 0
    assert session_service.next_active_index(session, 2) == 2
    assert session_service.next_active_index(session, 7) == 2


def test_next_active_index_single_active(session_service: SessionService, words):
    """Test that the only active item is found from any start position."""
    session = session_service.create_session(GameMode.VOCABULARY_RECALL, words)
    for index in (0, 1, 3, 4):
        session = eliminate(session_service, session, index)

    for start in range(len(words) * 2):
        assert session_service.next_active_index(session, start) == 2


def test_next_active_index_none_active(session_service: SessionService, words):
    """Test that a fully eliminated session has no next item."""
    session = session_service.create_session(GameMode.VOCABULARY_RECALL, words)
    for index in range(len(words)):
        session = eliminate(session_service, session, index)

    assert session_service.next_active_index(session, 0) is None
    assert session_service.next_active_index(session, 3) is None


def test_record_correct_eliminates(session_service: SessionService, words):
    """Test that one correct answer eliminates an item."""
    session = session_service.create_session(GameMode.VOCABULARY_RECALL, words)
    session = session_service.record_result(session, 1, True)

    assert session.items[1].correct_count == 1
    assert session.items[1].eliminated
    assert session_service.active_count(session) == len(words) - 1
    assert session.wrong_count == 0


def test_record_wrong_keeps_item(session_service: SessionService, words):
    """Test that a wrong answer is counted but never eliminates."""
    session = session_service.create_session(GameMode.VOCABULARY_RECALL, words)
    session = session_service.record_result(session, 1, False)
    session = session_service.record_result(session, 1, False)

    assert session.items[1].wrong_count == 2
    assert not session.items[1].eliminated
    assert session.items[1].required_correct == 1
    assert session.wrong_count == 2


def test_record_result_does_not_mutate(session_service: SessionService, words):
    """Test that recording returns a new session."""
    session = session_service.create_session(GameMode.VOCABULARY_RECALL, words)
    updated = session_service.record_result(session, 0, True)

    assert updated is not session
    assert not session.items[0].eliminated


def test_record_result_rejects_bad_index(session_service: SessionService, words):
    """Test precondition checks for record_result."""
    session = session_service.create_session(GameMode.VOCABULARY_RECALL, words)
    with pytest.raises(ValueError):
        session_service.record_result(session, len(words), True)
    with pytest.raises(ValueError):
        session_service.record_result(session, -1, True)

    session = eliminate(session_service, session, 0)
    with pytest.raises(ValueError):
        session_service.record_result(session, 0, True)


def test_complete_iff_no_active(session_service: SessionService, words, clock):
    """Test that completion tracks the active count after every answer."""
    session = session_service.create_session(GameMode.VOCABULARY_RECALL, words)
    results = [(0, False), (0, True), (1, True), (2, False), (3, True), (2, True), (4, False), (4, True)]
    eliminated_before = set()
    for index, is_correct in results:
        clock.advance(1000)
        session = session_service.record_result(session, index, is_correct)
        assert session.is_complete == (session_service.active_count(session) == 0)
        eliminated_now = {i for i, s in enumerate(session.items) if s.eliminated}
        assert eliminated_before <= eliminated_now
        eliminated_before = eliminated_now

    assert session.is_complete
    assert session.end_time == clock.now


def test_memorise_escalation(session_service: SessionService, words):
    """Test that wrong answers raise the required count up to the cap."""
    session = session_service.create_session(GameMode.VOCABULARY_MEMORISE, words)
    for _ in range(4):
        session = session_service.record_result(session, 0, False, max_required=3)
    assert session.items[0].required_correct == 3

    session = session_service.record_result(session, 0, True, max_required=3)
    session = session_service.record_result(session, 0, True, max_required=3)
    assert not session.items[0].eliminated
    session = session_service.record_result(session, 0, True, max_required=3)
    assert session.items[0].eliminated


def test_summarize(session_service: SessionService, words, clock):
    """Test time, accuracy and attempt totals."""
    session = session_service.create_session(GameMode.VOCABULARY_RECALL, words[:3])
    session = session_service.record_result(session, 0, True)
    session = session_service.record_result(session, 1, False)
    session = session_service.record_result(session, 1, True)
    clock.advance(42_500)
    session = session_service.record_result(session, 2, True)

    summary = session_service.summarize(session)
    assert summary.time_ms == 42_500
    assert summary.total_attempts == 4
    assert summary.wrong_count == 1
    assert summary.accuracy == 75
    assert summary.item_count == 3
    assert not summary.is_perfect


def test_summarize_rounds_half_up(session_service: SessionService, words):
    """Test accuracy rounding: 7 of 8 correct is 87.5 -> 88."""
    session = session_service.create_session(GameMode.VOCABULARY_RECALL, words[:1])
    session = replace(session, wrong_count=1)
    session = replace(session, items=(replace(session.items[0], correct_count=7, wrong_count=1),))

    assert session_service.summarize(session).accuracy == 88
