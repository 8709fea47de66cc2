"""Tests for the static practice content."""
import pytest

from suomiarena.content import (
    cases,
    genitive,
    partitive,
    pikkusanat,
    plural,
    question_words,
    songs,
    verbs,
    vocabulary,
)
from suomiarena.content.verbs import SENTENCE_ENDINGS, IMPERATIVE_TEMPLATES

TENSES = list(SENTENCE_ENDINGS) + list(IMPERATIVE_TEMPLATES)


def test_vocabulary_cycles():
    """Test that chapters split into cycles of the configured size."""
    cycles = vocabulary.get_all_cycles()
    assert [c.cycle_id for c in cycles] == ["1a", "1b", "2a"]
    assert len(vocabulary.get_cycle("1a").words) == 20
    assert len(vocabulary.get_cycle("1b").words) == 6
    assert vocabulary.get_cycle("1c") is None
    assert vocabulary.get_cycle("x") is None


def test_vocabulary_custom_cycle_size():
    """Test splitting with an explicit cycle size."""
    cycles = vocabulary.get_cycles_for_chapter(2, cycle_size=5)
    assert [c.cycle_id for c in cycles] == ["2a", "2b", "2c"]
    assert sum(len(c.words) for c in cycles) == len(vocabulary.get_chapter(2).words)
    assert vocabulary.get_cycles_for_chapter(99) == []


def test_vocabulary_words_for_cycles():
    """Test that unknown cycles are skipped."""
    words = vocabulary.get_words_for_cycles(["2a", "9z"])
    assert words == list(vocabulary.get_chapter(2).words)


def test_verbs_have_every_tense():
    """Test that every verb is conjugated in every practised tense."""
    assert len(TENSES) == 10
    for verb in verbs.VERBS:
        for tense in TENSES:
            assert verb.forms.get(tense), f"{verb.infinitive} has no {tense} forms"
        assert set(verb.forms["present"]) == set(verbs.PERSONS)


def test_verbs_by_type():
    """Test filtering by conjugation type."""
    assert {v.infinitive for v in verbs.get_verbs_for_types([3])} == {"olla", "tulla", "mennä"}
    assert verbs.get_verbs_for_types([]) == []
    assert verbs.get_verb("puhua").type == 1
    assert verbs.get_verb("ei-verbi") is None


@pytest.mark.parametrize("tense", TENSES)
def test_sentence_templates_have_blank(tense):
    """Test that every template has a place for the answer."""
    for template in verbs.sentence_templates(tense, "minä"):
        assert verbs.BLANK in template


def test_case_groups():
    """Test that groups select sentences by case."""
    location = cases.get_sentences_for_groups(["location"])
    assert location
    assert {s.case_used for s in location} <= {"inessive", "elative", "illative"}
    assert all(not s.is_plural for s in location)

    plural_location = cases.get_sentences_for_groups(["location"], plural=True)
    assert len(plural_location) == 6
    assert all(s.is_plural for s in plural_location)
    assert cases.get_sentences_for_groups(["surface"], plural=True) == []
    assert cases.get_sentences_for_groups(["no-such-group"]) == []


def test_case_sentences_blank():
    """Test that every case sentence has exactly one blank."""
    for sentence in cases.SENTENCES:
        assert sentence.sentence_with_blank.count(verbs.BLANK) == 1
        assert sentence.case_used in cases.CASES


def test_formation_rule_filters():
    """Test rule filters of the formation drills."""
    rules = {r.id for r in partitive.PARTITIVE_RULES}
    assert {w.rule for w in partitive.PARTITIVE_WORDS} <= rules
    assert partitive.get_rule_info("single-vowel").id == "single-vowel"
    assert partitive.get_rule_info("nope") is None

    singular = partitive.get_words_for_rules(rules)
    plural_words = partitive.get_words_for_rules(rules, plural=True)
    assert len(plural_words) <= len(singular)
    assert all(w.partitive_plural for w in plural_words)

    assert {w.rule for w in plural.get_words_for_rules(["old-i"])} == {"old-i"}
    assert {w.rule for w in genitive.get_words_for_rules(["nen-ending"])} == {"nen-ending"}
    assert genitive.get_words_for_rules([]) == []


def test_category_filters():
    """Test category filters of the word lists."""
    conjunctions = pikkusanat.get_words_for_categories(["conjunctions"])
    assert len(conjunctions) == 3
    assert all(w.category == "conjunctions" for w in conjunctions)
    assert {w.category for w in pikkusanat.PIKKUSANAT} <= set(pikkusanat.PIKKUSANA_CATEGORIES)

    where = question_words.get_words_for_categories(["where"])
    assert where
    assert {w.category for w in question_words.QUESTION_WORDS} <= set(question_words.QUESTION_CATEGORIES)


def test_song_words_unique():
    """Test that a song's words are de-duplicated ignoring case."""
    song = songs.get_song("sisko-tahtoo-humalaan")
    words = songs.get_song_words(song)
    keys = [w.finnish.lower() for w in words]
    assert len(keys) == len(set(keys))
    assert songs.get_words_for_songs(["sisko-tahtoo-humalaan", "unknown"]) == words
    assert songs.get_song("unknown") is None

    line = songs.find_line(words[0])
    assert line is song.lines[0]


def test_repeated_ids_count_once():
    """Test that naming a cycle or song twice does not repeat its words."""
    assert vocabulary.get_words_for_cycles(["1a", "1a"]) == vocabulary.get_words_for_cycles(["1a"])
    assert len(vocabulary.get_words_for_cycles(["1a", "2a", "1a"])) == 20 + 14
    song_id = "sisko-tahtoo-humalaan"
    assert songs.get_words_for_songs([song_id, song_id]) == songs.get_words_for_songs([song_id])
