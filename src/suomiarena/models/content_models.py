"""Shapes of the static practice content."""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class Verb:
    """A verb with its conjugation tables, keyed by tense then person."""
    infinitive: str
    type: int
    translation: str
    synonyms: Tuple[str, ...] = ()
    forms: Dict[str, Dict[str, str]] = field(default_factory=dict, hash=False, compare=False)


@dataclass(frozen=True)
class VocabularyWord:
    """A textbook vocabulary entry."""
    finnish: str
    english: str
    synonyms: Tuple[str, ...] = ()
    finnish_synonyms: Tuple[str, ...] = ()
    verb_type: Optional[int] = None
    case_required: Optional[str] = None
    note: Optional[str] = None


@dataclass(frozen=True)
class VocabularyChapter:
    """A textbook chapter (kappale)."""
    id: int
    name: str
    name_english: str
    words: Tuple[VocabularyWord, ...]


@dataclass(frozen=True)
class VocabularyCycle:
    """A fixed-size slice of a chapter, e.g. "1a"."""
    chapter_id: int
    cycle_id: str
    name: str
    words: Tuple[VocabularyWord, ...]


@dataclass(frozen=True)
class CaseSentence:
    """A sentence with one noun phrase blanked out."""
    id: str
    finnish: str
    english: str
    case_used: str
    word_in_case: str
    base_word: str
    category: str
    difficulty: str
    sentence_with_blank: str
    hint: Optional[str] = None
    is_plural: bool = False


@dataclass(frozen=True)
class PartitiveWord:
    nominative: str
    partitive: str
    translation: str
    rule: str
    hint: Optional[str] = None
    partitive_plural: Optional[str] = None


@dataclass(frozen=True)
class PluralWord:
    nominative: str
    nominative_plural: str
    translation: str
    rule: str
    hint: Optional[str] = None


@dataclass(frozen=True)
class GenitiveWord:
    nominative: str
    genitive_singular: str
    nominative_plural: str
    genitive_plural: str
    translation: str
    rule: str
    hint: Optional[str] = None


@dataclass(frozen=True)
class FormationRule:
    """Description of one formation rule shared by the noun-form tables."""
    id: str
    name: str
    finnish_name: str
    description: str
    formation: str


@dataclass(frozen=True)
class Pikkusana:
    """A small filler word."""
    finnish: str
    english: str
    category: str
    example: str = ""
    example_translation: str = ""


@dataclass(frozen=True)
class SongWord:
    finnish: str
    english: str
    part_of_speech: str
    grammar_note: Optional[str] = None
    base_form: Optional[str] = None


@dataclass(frozen=True)
class SongLine:
    finnish: str
    english: str
    words: Tuple[SongWord, ...]


@dataclass(frozen=True)
class Song:
    id: str
    title: str
    artist: str
    difficulty: str
    lines: Tuple[SongLine, ...]


@dataclass(frozen=True)
class QuestionWord:
    """A question word (kysymyssana)."""
    finnish: str
    english: str
    category: str
    usage: str
    example: str
    example_translation: str
    case_required: Optional[str] = None
    alternatives: Tuple[str, ...] = ()


PracticeItem = Union[
    Verb,
    VocabularyWord,
    CaseSentence,
    PartitiveWord,
    PluralWord,
    GenitiveWord,
    Pikkusana,
    SongWord,
    QuestionWord,
]


def item_key(item: PracticeItem) -> str:
    """Return the natural key of a practice item."""
    if isinstance(item, Verb):
        return item.infinitive
    if isinstance(item, CaseSentence):
        return item.id
    if isinstance(item, (PartitiveWord, PluralWord, GenitiveWord)):
        return item.nominative
    if isinstance(item, (VocabularyWord, Pikkusana, SongWord, QuestionWord)):
        return item.finnish
    raise ValueError(f"Unknown practice item type: {type(item).__name__}")
