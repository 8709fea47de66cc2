"""Game modes: one class per practice mode behind a common interface."""
import inspect
import logging
import random
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, final

from suomiarena.config import settings
from suomiarena.content import cases, genitive, partitive, pikkusanat, plural, question_words, songs, verbs, vocabulary
from suomiarena.models.content_models import (
    CaseSentence,
    GenitiveWord,
    PartitiveWord,
    Pikkusana,
    PluralWord,
    PracticeItem,
    QuestionWord,
    SongWord,
    Verb,
    VocabularyWord,
)
from suomiarena.models.session_models import GameMode, Prompt, Selection
from suomiarena.services.answer_checker import matches

logger = logging.getLogger(__name__)


def get_all_subclasses(cls):
    """Get all subclasses of a class."""
    all_subclasses = []
    for subclass in cls.__subclasses__():
        all_subclasses.append(subclass)
        all_subclasses.extend(get_all_subclasses(subclass))
    return all_subclasses


class BaseGameMode(ABC):
    """Base class for all game modes."""

    """Fields and methods that must be implemented by subclasses."""
    type: GameMode = GameMode.MENU
    expands_variants: bool = False  # English answers accept slash/parenthesis variants
    tracks_best_time: bool = True
    tracks_completion: bool = False  # Perfect runs unlock the next topic in the menu
    max_required_correct: int = 1

    @abstractmethod
    def build_pool(self, selection: Selection) -> List[PracticeItem]:
        """Collect the items for the selected topics."""
        raise NotImplementedError("Subclasses must implement this method")

    @abstractmethod
    def make_prompt(self, item: PracticeItem, rng: random.Random) -> Prompt:
        """Choose the question shown for an item."""
        raise NotImplementedError("Subclasses must implement this method")

    @abstractmethod
    def accepted_answers(self, item: PracticeItem, prompt: Optional[Prompt]) -> List[str]:
        """Accepted answers, canonical one first."""
        raise NotImplementedError("Subclasses must implement this method")

    def feedback_details(self, item: PracticeItem, prompt: Optional[Prompt]) -> Dict[str, Any]:
        return {}

    def topic_key(self, selection: Selection) -> str:
        return selection.key

    """Fields and methods that must not be overridden by subclasses."""

    @final
    def expected_answer(self, item: PracticeItem, prompt: Optional[Prompt] = None) -> str:
        return self.accepted_answers(item, prompt)[0]

    @final
    def check_answer(self, item: PracticeItem, prompt: Optional[Prompt], text: str) -> bool:
        return matches(text, self.accepted_answers(item, prompt), self.expands_variants)


# Vocabulary

class VocabularyRecallMode(BaseGameMode):
    """Finnish word shown, English answer expected."""
    type: GameMode = GameMode.VOCABULARY_RECALL
    expands_variants: bool = True
    tracks_completion: bool = True

    def build_pool(self, selection: Selection) -> List[PracticeItem]:
        return vocabulary.get_words_for_cycles(selection.topics)

    def make_prompt(self, item: VocabularyWord, rng: random.Random) -> Prompt:
        return Prompt(text=item.finnish, hint=item.note)

    def accepted_answers(self, item: VocabularyWord, prompt: Optional[Prompt]) -> List[str]:
        return [item.english, *item.synonyms]

    def feedback_details(self, item: VocabularyWord, prompt: Optional[Prompt]) -> Dict[str, Any]:
        details = {"finnish": item.finnish, "english": item.english, "synonyms": list(item.synonyms)}
        if item.verb_type:
            details["verb_type"] = item.verb_type
        if item.case_required:
            details["case_required"] = item.case_required
        if item.note:
            details["note"] = item.note
        return details


class VocabularyActiveRecallMode(VocabularyRecallMode):
    """English word shown, Finnish answer expected."""
    type: GameMode = GameMode.VOCABULARY_ACTIVE_RECALL
    expands_variants: bool = False

    def make_prompt(self, item: VocabularyWord, rng: random.Random) -> Prompt:
        return Prompt(text=item.english, hint=item.case_required)

    def accepted_answers(self, item: VocabularyWord, prompt: Optional[Prompt]) -> List[str]:
        return [item.finnish, *item.finnish_synonyms]


class VocabularyMemoriseMode(VocabularyActiveRecallMode):
    """Active recall where every miss asks for one more correct answer."""
    type: GameMode = GameMode.VOCABULARY_MEMORISE
    tracks_best_time: bool = False
    max_required_correct: int = settings.game.memorise_max_required


# Cases

class CasesFillBlankMode(BaseGameMode):
    """Sentence with the noun phrase blanked out."""
    type: GameMode = GameMode.CASES_FILL_BLANK
    plural: bool = False

    def build_pool(self, selection: Selection) -> List[PracticeItem]:
        return cases.get_sentences_for_groups(selection.topics, plural=self.plural)

    def make_prompt(self, item: CaseSentence, rng: random.Random) -> Prompt:
        return Prompt(text=item.sentence_with_blank, hint=item.hint)

    def accepted_answers(self, item: CaseSentence, prompt: Optional[Prompt]) -> List[str]:
        return [item.word_in_case]

    def feedback_details(self, item: CaseSentence, prompt: Optional[Prompt]) -> Dict[str, Any]:
        case_info = cases.CASES.get(item.case_used, {})
        return {
            "full_sentence": item.finnish,
            "translation": item.english,
            "case": item.case_used,
            "case_finnish": case_info.get("finnish_name"),
            "ending": case_info.get("ending"),
            "base_word": item.base_word,
            "hint": item.hint,
        }


class CasesFillBlankPluralMode(CasesFillBlankMode):
    type: GameMode = GameMode.CASES_FILL_BLANK_PLURAL
    plural: bool = True


# Verb conjugation

class VerbTypeMode(BaseGameMode):
    """Conjugate a verb for a random person in one tense."""
    tense: str = ""
    tracks_completion: bool = True

    def build_pool(self, selection: Selection) -> List[PracticeItem]:
        types = [int(topic) for topic in selection.topics if topic.isdigit()]
        return [verb for verb in verbs.get_verbs_for_types(types) if verb.forms.get(self.tense)]

    def make_prompt(self, item: Verb, rng: random.Random) -> Prompt:
        person = rng.choice(list(item.forms[self.tense]))
        template = rng.choice(verbs.sentence_templates(self.tense, person))
        return Prompt(
            text=template,
            person=person,
            tense=self.tense,
            hint=f"{item.infinitive} ({item.translation})",
        )

    def _person(self, item: Verb, prompt: Optional[Prompt]) -> str:
        if prompt is not None and prompt.person in item.forms[self.tense]:
            return prompt.person
        return next(iter(item.forms[self.tense]))

    def accepted_answers(self, item: Verb, prompt: Optional[Prompt]) -> List[str]:
        return [item.forms[self.tense][self._person(item, prompt)]]

    def feedback_details(self, item: Verb, prompt: Optional[Prompt]) -> Dict[str, Any]:
        answer = self.expected_answer(item, prompt)
        details = {
            "infinitive": item.infinitive,
            "translation": item.translation,
            "person": self._person(item, prompt),
            "tense": self.tense,
            "verb_type": item.type,
            "rule": verbs.VERB_TYPE_INFO[item.type]["rule"],
        }
        if prompt is not None:
            details["full_sentence"] = prompt.text.replace(verbs.BLANK, answer)
        return details


class VerbTypePresentMode(VerbTypeMode):
    type: GameMode = GameMode.VERB_TYPE_PRESENT
    tense: str = "present"


class VerbTypeNegativeMode(VerbTypeMode):
    type: GameMode = GameMode.VERB_TYPE_NEGATIVE
    tense: str = "negative"


class VerbTypeImperfectMode(VerbTypeMode):
    type: GameMode = GameMode.VERB_TYPE_IMPERFECT
    tense: str = "imperfect"


class VerbTypeImperfectNegativeMode(VerbTypeMode):
    type: GameMode = GameMode.VERB_TYPE_IMPERFECT_NEGATIVE
    tense: str = "imperfect_negative"


class VerbTypeImperativeMode(VerbTypeMode):
    type: GameMode = GameMode.VERB_TYPE_IMPERATIVE
    tense: str = "imperative"


class VerbTypeImperativeNegativeMode(VerbTypeMode):
    type: GameMode = GameMode.VERB_TYPE_IMPERATIVE_NEGATIVE
    tense: str = "imperative_negative"


class VerbTypeConditionalMode(VerbTypeMode):
    type: GameMode = GameMode.VERB_TYPE_CONDITIONAL
    tense: str = "conditional"


class VerbTypeConditionalNegativeMode(VerbTypeMode):
    type: GameMode = GameMode.VERB_TYPE_CONDITIONAL_NEGATIVE
    tense: str = "conditional_negative"


class VerbTypeConditionalPerfectMode(VerbTypeMode):
    type: GameMode = GameMode.VERB_TYPE_CONDITIONAL_PERFECT
    tense: str = "conditional_perfect"


class VerbTypeConditionalPerfectNegativeMode(VerbTypeMode):
    type: GameMode = GameMode.VERB_TYPE_CONDITIONAL_PERFECT_NEGATIVE
    tense: str = "conditional_perfect_negative"


# Noun forms

class PartitiveMode(BaseGameMode):
    """Nominative shown, partitive expected."""
    type: GameMode = GameMode.PARTITIVE
    plural: bool = False

    def build_pool(self, selection: Selection) -> List[PracticeItem]:
        return partitive.get_words_for_rules(selection.topics, plural=self.plural)

    def make_prompt(self, item: PartitiveWord, rng: random.Random) -> Prompt:
        return Prompt(text=item.nominative, hint=item.translation)

    def accepted_answers(self, item: PartitiveWord, prompt: Optional[Prompt]) -> List[str]:
        return [item.partitive_plural if self.plural else item.partitive]

    def feedback_details(self, item: PartitiveWord, prompt: Optional[Prompt]) -> Dict[str, Any]:
        rule = partitive.get_rule_info(item.rule)
        return {
            "translation": item.translation,
            "rule": rule.name if rule else item.rule,
            "formation": rule.formation if rule else None,
            "hint": item.hint,
        }


class PartitivePluralMode(PartitiveMode):
    type: GameMode = GameMode.PARTITIVE_PLURAL
    plural: bool = True


class PluralMode(BaseGameMode):
    """Nominative singular shown, nominative plural expected."""
    type: GameMode = GameMode.PLURAL

    def build_pool(self, selection: Selection) -> List[PracticeItem]:
        return plural.get_words_for_rules(selection.topics)

    def make_prompt(self, item: PluralWord, rng: random.Random) -> Prompt:
        return Prompt(text=item.nominative, hint=item.translation)

    def accepted_answers(self, item: PluralWord, prompt: Optional[Prompt]) -> List[str]:
        return [item.nominative_plural]

    def feedback_details(self, item: PluralWord, prompt: Optional[Prompt]) -> Dict[str, Any]:
        return {"translation": item.translation, "rule": item.rule, "hint": item.hint}


class GenitiveMode(BaseGameMode):
    """Nominative shown, genitive singular expected."""
    type: GameMode = GameMode.GENITIVE
    plural: bool = False

    def build_pool(self, selection: Selection) -> List[PracticeItem]:
        return genitive.get_words_for_rules(selection.topics)

    def make_prompt(self, item: GenitiveWord, rng: random.Random) -> Prompt:
        text = item.nominative_plural if self.plural else item.nominative
        return Prompt(text=text, hint=item.translation)

    def accepted_answers(self, item: GenitiveWord, prompt: Optional[Prompt]) -> List[str]:
        return [item.genitive_plural if self.plural else item.genitive_singular]

    def feedback_details(self, item: GenitiveWord, prompt: Optional[Prompt]) -> Dict[str, Any]:
        return {
            "translation": item.translation,
            "nominative": item.nominative,
            "genitive_singular": item.genitive_singular,
            "genitive_plural": item.genitive_plural,
            "rule": item.rule,
            "hint": item.hint,
        }


class GenitivePluralMode(GenitiveMode):
    type: GameMode = GameMode.GENITIVE_PLURAL
    plural: bool = True


# Words with English answers

class PikkusanatMode(BaseGameMode):
    """Small filler word shown, English meaning expected."""
    type: GameMode = GameMode.PIKKUSANAT
    expands_variants: bool = True

    def build_pool(self, selection: Selection) -> List[PracticeItem]:
        return pikkusanat.get_words_for_categories(selection.topics)

    def make_prompt(self, item: Pikkusana, rng: random.Random) -> Prompt:
        return Prompt(text=item.finnish)

    def accepted_answers(self, item: Pikkusana, prompt: Optional[Prompt]) -> List[str]:
        # "then, later" lists separate meanings
        meanings = [part.strip() for part in item.english.split(",") if part.strip()]
        return [item.english, *meanings]

    def feedback_details(self, item: Pikkusana, prompt: Optional[Prompt]) -> Dict[str, Any]:
        return {
            "category": item.category,
            "example": item.example,
            "example_translation": item.example_translation,
        }


class LyricsMode(BaseGameMode):
    """Word from a song shown with its line, English meaning expected."""
    type: GameMode = GameMode.LYRICS
    expands_variants: bool = True

    def build_pool(self, selection: Selection) -> List[PracticeItem]:
        return songs.get_words_for_songs(selection.topics)

    def make_prompt(self, item: SongWord, rng: random.Random) -> Prompt:
        line = songs.find_line(item)
        return Prompt(text=item.finnish, hint=line.finnish if line else None)

    def accepted_answers(self, item: SongWord, prompt: Optional[Prompt]) -> List[str]:
        return [item.english]

    def feedback_details(self, item: SongWord, prompt: Optional[Prompt]) -> Dict[str, Any]:
        line = songs.find_line(item)
        return {
            "part_of_speech": item.part_of_speech,
            "grammar_note": item.grammar_note,
            "base_form": item.base_form,
            "line": line.finnish if line else None,
            "line_translation": line.english if line else None,
        }


class QuestionWordsMode(BaseGameMode):
    """Question word shown, English meaning expected."""
    type: GameMode = GameMode.QUESTION_WORDS
    expands_variants: bool = True

    def build_pool(self, selection: Selection) -> List[PracticeItem]:
        return question_words.get_words_for_categories(selection.topics)

    def make_prompt(self, item: QuestionWord, rng: random.Random) -> Prompt:
        return Prompt(text=item.finnish)

    def accepted_answers(self, item: QuestionWord, prompt: Optional[Prompt]) -> List[str]:
        return [item.english, *item.alternatives]

    def feedback_details(self, item: QuestionWord, prompt: Optional[Prompt]) -> Dict[str, Any]:
        return {
            "usage": item.usage,
            "example": item.example,
            "example_translation": item.example_translation,
            "case_required": item.case_required,
        }


def _build_registry() -> Mapping[GameMode, BaseGameMode]:
    """Instantiate every concrete game mode, keyed by its GameMode."""
    registry = {}
    for mode_class in get_all_subclasses(BaseGameMode):
        if inspect.isabstract(mode_class) or mode_class.type == GameMode.MENU:
            continue
        logger.debug(f"Registering game mode {mode_class.__name__} for {mode_class.type.value}")
        registry[mode_class.type] = mode_class()
    return MappingProxyType(registry)


GAME_MODES = _build_registry()


def get_game_mode(mode: GameMode) -> BaseGameMode:
    """Return the mode implementation registered for a GameMode."""
    try:
        return GAME_MODES[mode]
    except KeyError:
        raise ValueError(f"No game mode registered for {mode}") from None
