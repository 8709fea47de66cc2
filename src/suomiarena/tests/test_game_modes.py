"""Tests for game modes."""
import random

import pytest

from suomiarena.config import settings
from suomiarena.content import verbs
from suomiarena.models.content_models import PartitiveWord, Verb
from suomiarena.models.session_models import GameMode, Selection
from suomiarena.services.game_modes import GAME_MODES, BaseGameMode, get_game_mode

# A selection with items for every practice mode
SELECTIONS = {
    GameMode.VOCABULARY_RECALL: Selection.of("1a"),
    GameMode.VOCABULARY_ACTIVE_RECALL: Selection.of("1a"),
    GameMode.VOCABULARY_MEMORISE: Selection.of("1a", "2a"),
    GameMode.CASES_FILL_BLANK: Selection.of("location"),
    GameMode.CASES_FILL_BLANK_PLURAL: Selection.of("location", "surface"),
    GameMode.PARTITIVE: Selection.of("single-vowel"),
    GameMode.PARTITIVE_PLURAL: Selection.of("single-vowel", "old-i"),
    GameMode.PLURAL: Selection.of("old-i"),
    GameMode.GENITIVE: Selection.of("nen-ending"),
    GameMode.GENITIVE_PLURAL: Selection.of("consonant"),
    GameMode.PIKKUSANAT: Selection.of("conjunctions"),
    GameMode.LYRICS: Selection.of("sisko-tahtoo-humalaan"),
    GameMode.QUESTION_WORDS: Selection.of("where", "when"),
    **{mode: Selection.of("1", "2") for mode in GameMode if mode.value.startswith("verb-type-")},
}

PRACTICE_MODES = [mode for mode in GameMode if mode != GameMode.MENU]


def test_every_mode_registered():
    """Test that every practice mode has an implementation."""
    for mode in PRACTICE_MODES:
        game_mode = get_game_mode(mode)
        assert isinstance(game_mode, BaseGameMode)
        assert game_mode.type == mode


def test_registry_is_fixed():
    """Test that the registry is complete at import and cannot be changed."""
    assert set(GAME_MODES) == set(PRACTICE_MODES)
    with pytest.raises(TypeError):
        GAME_MODES[GameMode.MENU] = get_game_mode(GameMode.PLURAL)
    assert get_game_mode(GameMode.PLURAL) is GAME_MODES[GameMode.PLURAL]


def test_menu_is_not_a_mode():
    """Test that the menu has no implementation."""
    with pytest.raises(ValueError):
        get_game_mode(GameMode.MENU)


@pytest.mark.parametrize("mode", PRACTICE_MODES, ids=lambda m: m.value)
def test_expected_answer_is_accepted(mode):
    """Test that every item's canonical answer passes its own check."""
    game_mode = get_game_mode(mode)
    pool = game_mode.build_pool(SELECTIONS[mode])
    assert pool

    rng = random.Random(7)
    for item in pool:
        prompt = game_mode.make_prompt(item, rng)
        assert prompt.text
        answer = game_mode.expected_answer(item, prompt)
        assert game_mode.check_answer(item, prompt, answer.upper())
        assert not game_mode.check_answer(item, prompt, "")
        assert isinstance(game_mode.feedback_details(item, prompt), dict)


def test_empty_selection_gives_empty_pool():
    """Test that no topics means no items."""
    for mode in PRACTICE_MODES:
        assert get_game_mode(mode).build_pool(Selection()) == []


def test_topic_key():
    """Test that topic keys ignore order and duplicates."""
    game_mode = get_game_mode(GameMode.VERB_TYPE_PRESENT)
    assert game_mode.topic_key(Selection.of(3, 1, 3)) == "1+3"
    assert game_mode.topic_key(Selection.of("1", "3")) == game_mode.topic_key(Selection.of("3", "1"))


def test_verb_type_pool_filters_types():
    """Test that verb pools only hold verbs of the selected types."""
    pool = get_game_mode(GameMode.VERB_TYPE_IMPERFECT).build_pool(Selection.of("2"))
    assert pool
    assert all(isinstance(verb, Verb) and verb.type == 2 for verb in pool)


def test_verb_prompt_person_and_sentence():
    """Test that verb prompts pick a person that has a form in the tense."""
    game_mode = get_game_mode(GameMode.VERB_TYPE_IMPERATIVE)
    verb = verbs.get_verb("puhua")
    rng = random.Random(3)
    for _ in range(20):
        prompt = game_mode.make_prompt(verb, rng)
        assert prompt.person in verb.forms["imperative"]
        assert prompt.tense == "imperative"
        assert verbs.BLANK in prompt.text

    details = game_mode.feedback_details(verb, prompt)
    assert details["infinitive"] == "puhua"
    assert verbs.BLANK not in details["full_sentence"]
    assert game_mode.expected_answer(verb, prompt) in details["full_sentence"]


def test_partitive_plural_answer():
    """Test that the plural partitive mode asks for the plural form."""
    word = PartitiveWord("talo", "taloa", "house", "single-vowel", partitive_plural="taloja")
    assert get_game_mode(GameMode.PARTITIVE).expected_answer(word) == "taloa"
    assert get_game_mode(GameMode.PARTITIVE_PLURAL).expected_answer(word) == "taloja"


def test_pikkusanat_accepts_each_meaning():
    """Test that comma separated meanings are accepted on their own."""
    game_mode = get_game_mode(GameMode.PIKKUSANAT)
    word = next(w for w in game_mode.build_pool(Selection.of("adverbs")) if w.finnish == "sitten")
    assert game_mode.check_answer(word, None, "later")
    assert game_mode.check_answer(word, None, "then")


def test_mode_flags():
    """Test which modes record best times and topic completion."""
    memorise = get_game_mode(GameMode.VOCABULARY_MEMORISE)
    assert not memorise.tracks_best_time
    assert memorise.max_required_correct == settings.game.memorise_max_required
    assert get_game_mode(GameMode.VOCABULARY_RECALL).tracks_completion
    assert get_game_mode(GameMode.VERB_TYPE_CONDITIONAL).tracks_completion
    assert not get_game_mode(GameMode.PARTITIVE).tracks_completion
    assert get_game_mode(GameMode.LYRICS).expands_variants
    assert not get_game_mode(GameMode.GENITIVE).expands_variants
