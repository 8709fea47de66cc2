"""Tests for answer checking."""
import pytest

from suomiarena.content.verbs import get_verb
from suomiarena.models.content_models import QuestionWord, VocabularyWord
from suomiarena.models.session_models import GameMode, Prompt
from suomiarena.services.answer_checker import (
    answer_variants,
    check,
    expected_answer,
    matches,
    normalize,
)


def test_normalize():
    """Test trimming and Unicode-aware lowercasing."""
    assert normalize("  PÖYTÄ ") == "pöytä"
    assert normalize("Älä Puhu") == "älä puhu"
    assert normalize("   ") == ""


@pytest.mark.parametrize(
    "base, expected",
    [
        ("to eat", {"to eat", "eat"}),
        ("ordinary/usual", {"ordinary/usual", "ordinary", "usual"}),
        ("to go/come", {"to go/come", "to go", "to come", "go", "come"}),
        ("to take (time)", {"to take (time)", "to take", "take"}),
        ("he/she runs", {"he/she runs", "he runs", "she runs", "runs"}),
        ("what / which (one)", {"what", "which", "which (one)"}),
    ],
)
def test_answer_variants(base, expected):
    """Test that variants cover the documented spellings."""
    assert expected <= answer_variants(base)


def test_answer_variants_keep_original():
    """Test that the normalized base is always accepted."""
    assert "who (subject)" in answer_variants("Who (subject)")


@pytest.mark.parametrize(
    "raw, accepted, expand, result",
    [
        ("Eat", ["to eat"], True, True),
        ("she runs", ["he/she runs"], True, True),
        ("Puhua", ["puhua"], False, True),
        ("puhu", ["puhua"], False, False),
        ("  puhua  ", ["puhua"], False, True),
        ("", ["puhua"], False, False),
        ("   ", ["to eat"], True, False),
        ("eat", ["to eat"], False, False),
        ("lodging", ["accommodation", "lodging", "housing"], True, True),
        ("eats", ["to eat"], True, False),
    ],
)
def test_matches(raw, accepted, expand, result):
    """Test exact matching with and without English variants."""
    assert matches(raw, accepted, expand) is result


def test_check_vocabulary_recall():
    """Test Finnish to English checking through the mode registry."""
    word = VocabularyWord(finnish="syödä", english="to eat", synonyms=("to dine",))
    assert check(GameMode.VOCABULARY_RECALL, word, "eat")
    assert check(GameMode.VOCABULARY_RECALL, word, "Dine")
    assert not check(GameMode.VOCABULARY_RECALL, word, "drink")
    assert expected_answer(GameMode.VOCABULARY_RECALL, word) == "to eat"


def test_check_active_recall_is_exact():
    """Test that Finnish answers get no variant expansion."""
    word = VocabularyWord(finnish="ratikka", english="tram", finnish_synonyms=("raitiovaunu",))
    assert check(GameMode.VOCABULARY_ACTIVE_RECALL, word, "Ratikka")
    assert check(GameMode.VOCABULARY_ACTIVE_RECALL, word, "raitiovaunu")
    assert not check(GameMode.VOCABULARY_ACTIVE_RECALL, word, "ratika")


def test_check_verb_uses_prompt_person():
    """Test that verb answers depend on the person in the prompt."""
    verb = get_verb("puhua")
    prompt = Prompt(text="Minä ___ joka päivä.", person="minä", tense="present")
    assert check(GameMode.VERB_TYPE_PRESENT, verb, "puhun", prompt)
    assert not check(GameMode.VERB_TYPE_PRESENT, verb, "puhut", prompt)
    assert expected_answer(GameMode.VERB_TYPE_NEGATIVE, verb, Prompt(text="", person="he")) == "eivät puhu"


def test_check_question_word_alternatives():
    """Test that alternatives are accepted for question words."""
    word = QuestionWord(
        finnish="mistä",
        english="where from / from where",
        category="where",
        usage="",
        example="",
        example_translation="",
        alternatives=("from where", "where from"),
    )
    assert check(GameMode.QUESTION_WORDS, word, "Where from")
    assert check(GameMode.QUESTION_WORDS, word, "from where")
    assert not check(GameMode.QUESTION_WORDS, word, "where")
