"""Suomen Mestari 2 vocabulary, by chapter (kappale)."""
from typing import Iterable, List, Optional

from suomiarena.config import settings
from suomiarena.models.content_models import VocabularyChapter, VocabularyCycle, VocabularyWord

CHAPTERS: List[VocabularyChapter] = [
    VocabularyChapter(
        id=1,
        name="Kappale 1",
        name_english="Chapter 1 - Travel & Accommodation",
        words=(
            VocabularyWord(finnish="eka", english="first", finnish_synonyms=("ensimmäinen",), note="colloquial"),
            VocabularyWord(finnish="majoitus", english="accommodation", synonyms=("lodging", "housing")),
            VocabularyWord(finnish="varata", english="to book", synonyms=("to reserve",), verb_type=4),
            VocabularyWord(finnish="varataanks me", english="shall we book", finnish_synonyms=("varaammeko",), note="colloquial question"),
            VocabularyWord(finnish="jostain", english="from somewhere", synonyms=("from some place",)),
            VocabularyWord(finnish="kelvata", english="to be acceptable", synonyms=("to be good enough", "to suit"), verb_type=4),
            VocabularyWord(finnish="vuokrata", english="to rent", synonyms=("to lease",), verb_type=4),
            VocabularyWord(finnish="alue", english="area", synonyms=("region", "district", "zone")),
            VocabularyWord(finnish="päästä", english="to get to", synonyms=("to reach", "to arrive at"), verb_type=3, case_required="MIHIN"),
            VocabularyWord(finnish="ratikka", english="tram", synonyms=("streetcar", "trolley"), finnish_synonyms=("raitiovaunu",), note="colloquial"),
            VocabularyWord(finnish="helposti", english="easily", synonyms=("without difficulty",)),
            VocabularyWord(finnish="joka paikkaan", english="everywhere", synonyms=("to every place", "all over")),
            VocabularyWord(finnish="hoitaa", english="to take care of", synonyms=("to handle", "to manage", "to arrange"), verb_type=1),
            VocabularyWord(finnish="tarkistaa", english="to check", synonyms=("to verify", "to confirm"), verb_type=1),
            VocabularyWord(finnish="äsken", english="just now", synonyms=("a moment ago", "recently")),
            VocabularyWord(finnish="aikataulu", english="schedule", synonyms=("timetable",)),
            VocabularyWord(finnish="netti", english="internet", synonyms=("net", "web"), finnish_synonyms=("internet",), note="colloquial"),
            VocabularyWord(finnish="ehtiä", english="to have time for", synonyms=("to make it", "to manage in time"), verb_type=1, case_required="MIHIN"),
            VocabularyWord(finnish="tulla kiire", english="to be in a hurry", synonyms=("to become rushed",)),
            VocabularyWord(finnish="heittää", english="to drop off", synonyms=("to take", "to give a ride"), verb_type=1, case_required="MIHIN", finnish_synonyms=("viedä",), note="colloquial = viedä"),
            VocabularyWord(finnish="mut", english="me", finnish_synonyms=("minut",), note="colloquial accusative"),
            VocabularyWord(finnish="kestää", english="to last", synonyms=("to take (time)", "to endure"), verb_type=1),
            VocabularyWord(finnish="me ollaan", english="we are", finnish_synonyms=("olemme",), note="colloquial"),
            VocabularyWord(finnish="olla perillä", english="to have arrived", synonyms=("to be there", "to be at destination")),
            VocabularyWord(finnish="kaveri", english="friend", synonyms=("buddy", "pal", "mate")),
            VocabularyWord(finnish="hakea", english="to pick up", synonyms=("to fetch", "to get"), verb_type=1, case_required="MISTÄ"),
        ),
    ),
    VocabularyChapter(
        id=2,
        name="Kappale 2",
        name_english="Chapter 2 - Health & Body",
        words=(
            VocabularyWord(finnish="huono olo", english="bad feeling", synonyms=("feeling unwell", "feeling sick")),
            VocabularyWord(finnish="laahustaa", english="to shuffle", synonyms=("to drag one's feet",), verb_type=1),
            VocabularyWord(finnish="jossa", english="where", synonyms=("in which",), note="relative pronoun"),
            VocabularyWord(finnish="kokeilla", english="to try", synonyms=("to test", "to attempt"), verb_type=3),
            VocabularyWord(finnish="otsa", english="forehead"),
            VocabularyWord(finnish="tulikuuma", english="burning hot", synonyms=("scorching", "very hot")),
            VocabularyWord(finnish="kuume", english="fever"),
            VocabularyWord(finnish="keittää", english="to boil", verb_type=1),
            VocabularyWord(finnish="kuumemittari", english="thermometer"),
            VocabularyWord(finnish="lopulta", english="finally", synonyms=("eventually", "in the end")),
            VocabularyWord(finnish="löytää", english="to find", verb_type=1, case_required="MISTÄ", note="löytää + MISTÄ = find from"),
            VocabularyWord(finnish="etsiä", english="to search", synonyms=("to look for",), verb_type=1, case_required="MISTÄ", note="etsiä + MISTÄ = search from"),
            VocabularyWord(finnish="terveyskeskus", english="health center", synonyms=("health station",), finnish_synonyms=("terveysasema",)),
            VocabularyWord(finnish="verkkosivut", english="website", synonyms=("web pages",)),
        ),
    ),
]


def get_chapter(chapter_id: int) -> Optional[VocabularyChapter]:
    """Get a chapter by its number."""
    for chapter in CHAPTERS:
        if chapter.id == chapter_id:
            return chapter
    return None


def get_cycles_for_chapter(chapter_id: int, cycle_size: Optional[int] = None) -> List[VocabularyCycle]:
    """Split a chapter into cycles of `cycle_size` words: 1a, 1b, ..."""
    chapter = get_chapter(chapter_id)
    if chapter is None:
        return []
    size = cycle_size or settings.game.vocabulary_cycle_size

    cycles = []
    for i, start in enumerate(range(0, len(chapter.words), size)):
        cycle_id = f"{chapter_id}{chr(ord('a') + i)}"
        cycles.append(
            VocabularyCycle(
                chapter_id=chapter.id,
                cycle_id=cycle_id,
                name=f"Kappale {cycle_id}",
                words=chapter.words[start:start + size],
            )
        )
    return cycles


def get_all_cycles() -> List[VocabularyCycle]:
    """Return the cycles of every chapter."""
    return [cycle for chapter in CHAPTERS for cycle in get_cycles_for_chapter(chapter.id)]


def get_cycle(cycle_id: str) -> Optional[VocabularyCycle]:
    """Look up a cycle such as "1a"; None for unknown ids."""
    digits = ""
    for char in cycle_id:
        if not char.isdigit():
            break
        digits += char
    if not digits:
        return None
    for cycle in get_cycles_for_chapter(int(digits)):
        if cycle.cycle_id == cycle_id:
            return cycle
    return None


def get_words_for_cycles(cycle_ids: Iterable[str]) -> List[VocabularyWord]:
    """Return the words of the given cycles, skipping unknown and repeated ids."""
    words = []
    for cycle_id in dict.fromkeys(cycle_ids):
        cycle = get_cycle(cycle_id)
        if cycle is not None:
            words.extend(cycle.words)
    return words
