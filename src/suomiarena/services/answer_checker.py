"""Answer normalisation and matching."""
import itertools
import logging
import re
from typing import Iterable, Optional, Set

from suomiarena.models.content_models import PracticeItem
from suomiarena.models.session_models import GameMode, Prompt

logger = logging.getLogger(__name__)

_PARENTHETICAL = re.compile(r"\([^)]*\)")
_SPACED_SLASH = re.compile(r"\s+/\s+")
# Pronoun alternates that may also be left out entirely
_OPTIONAL_TOKENS = {"he/she", "she/he", "he/she/it"}


def normalize(text: str) -> str:
    """Trim and lowercase an answer."""
    return text.strip().lower()


def _collapse(text: str) -> str:
    return " ".join(text.split())


def _expand_slashes(phrase: str) -> Set[str]:
    """Expand word-level slash alternates: "to go/come" -> "to go", "to come"."""
    options = []
    for token in phrase.split():
        if "/" in token:
            choices = [part for part in token.split("/") if part]
            if token in _OPTIONAL_TOKENS:
                choices.append("")
            options.append(choices or [token])
        else:
            options.append([token])
    return {_collapse(" ".join(combo)) for combo in itertools.product(*options)}


def answer_variants(base: str) -> Set[str]:
    """Return every accepted spelling of an English answer.

    Covers dropped parenthetical notes, slash alternates (phrase-level
    "a / b" and word-level "a/b"), optional "he/she" pronouns and a
    dropped leading "to ". The normalized base itself is always included.
    """
    normalized = normalize(base)
    candidates = {normalized, _collapse(_PARENTHETICAL.sub(" ", normalized))}

    phrases = set()
    for candidate in candidates:
        phrases.update(part.strip() for part in _SPACED_SLASH.split(candidate))

    variants = set(candidates)
    for phrase in phrases:
        variants.update(_expand_slashes(phrase))

    for variant in list(variants):
        if variant.startswith("to "):
            variants.add(variant[3:])

    variants.add(normalized)
    variants.discard("")
    return variants


def matches(raw_answer: str, accepted: Iterable[str], expand_variants: bool = False) -> bool:
    """Check an answer against accepted forms by exact normalized equality."""
    answer = normalize(raw_answer)
    if not answer:
        return False
    for form in accepted:
        if expand_variants:
            if answer in answer_variants(form):
                return True
        elif answer == normalize(form):
            return True
    return False


def check(mode: GameMode, item: PracticeItem, raw_answer: str, prompt: Optional[Prompt] = None) -> bool:
    """Check an answer for an item in the given mode."""
    from suomiarena.services.game_modes import get_game_mode

    return get_game_mode(mode).check_answer(item, prompt, raw_answer)


def expected_answer(mode: GameMode, item: PracticeItem, prompt: Optional[Prompt] = None) -> str:
    """Return the canonical answer shown after a wrong attempt."""
    from suomiarena.services.game_modes import get_game_mode

    return get_game_mode(mode).expected_answer(item, prompt)
