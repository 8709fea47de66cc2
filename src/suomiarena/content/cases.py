"""Location and surface case sentences for fill-in-the-blank practice."""
from typing import Dict, Iterable, List, Tuple

from suomiarena.models.content_models import CaseSentence

CASES: Dict[str, Dict[str, str]] = {
    "inessive": {"finnish_name": "inessiivi", "ending": "-ssa / -ssä", "meaning": "inside, in", "question": "Missä?"},
    "elative": {"finnish_name": "elatiivi", "ending": "-sta / -stä", "meaning": "out of, from (inside)", "question": "Mistä?"},
    "illative": {"finnish_name": "illatiivi", "ending": "-Vn / -seen / -hVn", "meaning": "into", "question": "Mihin?"},
    "adessive": {"finnish_name": "adessiivi", "ending": "-lla / -llä", "meaning": "on, at", "question": "Millä?"},
    "ablative": {"finnish_name": "ablatiivi", "ending": "-lta / -ltä", "meaning": "off, from (surface)", "question": "Miltä?"},
    "allative": {"finnish_name": "allatiivi", "ending": "-lle", "meaning": "onto, to", "question": "Mille?"},
}

# Menu groups: broad, movement-based and individual cases
CASE_GROUPS: Dict[str, Tuple[str, ...]] = {
    "location": ("inessive", "elative", "illative"),
    "surface": ("adessive", "ablative", "allative"),
    "static": ("inessive", "adessive"),
    "from": ("elative", "ablative"),
    "to": ("illative", "allative"),
    **{name: (name,) for name in CASES},
}

SENTENCES: List[CaseSentence] = [
    CaseSentence(
        id="loc-1",
        finnish="Olen talossa.",
        english="I am in the house.",
        case_used="inessive",
        word_in_case="talossa",
        base_word="talo",
        category="location",
        difficulty="easy",
        sentence_with_blank="Olen ___.",
        hint="talo + -ssa",
    ),
    CaseSentence(
        id="loc-2",
        finnish="Hän on koulussa.",
        english="He/She is at school.",
        case_used="inessive",
        word_in_case="koulussa",
        base_word="koulu",
        category="location",
        difficulty="easy",
        sentence_with_blank="Hän on ___.",
        hint="koulu + -ssa",
    ),
    CaseSentence(
        id="loc-8",
        finnish="Tulen talosta.",
        english="I come from the house.",
        case_used="elative",
        word_in_case="talosta",
        base_word="talo",
        category="location",
        difficulty="easy",
        sentence_with_blank="Tulen ___.",
        hint="talo + -sta",
    ),
    CaseSentence(
        id="loc-9",
        finnish="Hän tulee koulusta.",
        english="He/She comes from school.",
        case_used="elative",
        word_in_case="koulusta",
        base_word="koulu",
        category="location",
        difficulty="easy",
        sentence_with_blank="Hän tulee ___.",
        hint="koulu + -sta",
    ),
    CaseSentence(
        id="loc-14",
        finnish="Menen taloon.",
        english="I go into the house.",
        case_used="illative",
        word_in_case="taloon",
        base_word="talo",
        category="location",
        difficulty="easy",
        sentence_with_blank="Menen ___.",
        hint="talo + -on",
    ),
    CaseSentence(
        id="loc-15",
        finnish="Hän menee kouluun.",
        english="He/She goes to school.",
        case_used="illative",
        word_in_case="kouluun",
        base_word="koulu",
        category="location",
        difficulty="easy",
        sentence_with_blank="Hän menee ___.",
        hint="koulu + -un",
    ),
    CaseSentence(
        id="sur-1",
        finnish="Kirja on pöydällä.",
        english="The book is on the table.",
        case_used="adessive",
        word_in_case="pöydällä",
        base_word="pöytä",
        category="surface",
        difficulty="easy",
        sentence_with_blank="Kirja on ___.",
        hint="pöytä + -llä",
    ),
    CaseSentence(
        id="sur-2",
        finnish="Olen torilla.",
        english="I am at the market.",
        case_used="adessive",
        word_in_case="torilla",
        base_word="tori",
        category="surface",
        difficulty="easy",
        sentence_with_blank="Olen ___.",
        hint="tori + -lla",
    ),
    CaseSentence(
        id="sur-8",
        finnish="Otan kirjan pöydältä.",
        english="I take the book from the table.",
        case_used="ablative",
        word_in_case="pöydältä",
        base_word="pöytä",
        category="surface",
        difficulty="easy",
        sentence_with_blank="Otan kirjan ___.",
        hint="pöytä + -ltä",
    ),
    CaseSentence(
        id="sur-9",
        finnish="Tulen torilta.",
        english="I come from the market.",
        case_used="ablative",
        word_in_case="torilta",
        base_word="tori",
        category="surface",
        difficulty="easy",
        sentence_with_blank="Tulen ___.",
        hint="tori + -lta",
    ),
    CaseSentence(
        id="sur-14",
        finnish="Laitan kirjan pöydälle.",
        english="I put the book on the table.",
        case_used="allative",
        word_in_case="pöydälle",
        base_word="pöytä",
        category="surface",
        difficulty="easy",
        sentence_with_blank="Laitan kirjan ___.",
        hint="pöytä + -lle",
    ),
    CaseSentence(
        id="sur-15",
        finnish="Menen torille.",
        english="I go to the market.",
        case_used="allative",
        word_in_case="torille",
        base_word="tori",
        category="surface",
        difficulty="easy",
        sentence_with_blank="Menen ___.",
        hint="tori + -lle",
    ),
    CaseSentence(
        id="pl-loc-1",
        finnish="Koirat ovat taloissa.",
        english="The dogs are in the houses.",
        case_used="inessive",
        word_in_case="taloissa",
        base_word="talot",
        category="location",
        difficulty="medium",
        sentence_with_blank="Koirat ovat ___.",
        hint="talot → talo + i + ssa",
        is_plural=True,
    ),
    CaseSentence(
        id="pl-loc-2",
        finnish="Lapset ovat kouluissa.",
        english="The children are in the schools.",
        case_used="inessive",
        word_in_case="kouluissa",
        base_word="koulut",
        category="location",
        difficulty="medium",
        sentence_with_blank="Lapset ovat ___.",
        hint="koulut → koulu + i + ssa",
        is_plural=True,
    ),
    CaseSentence(
        id="pl-loc-6",
        finnish="Lapset tulevat kouluista.",
        english="The children come from the schools.",
        case_used="elative",
        word_in_case="kouluista",
        base_word="koulut",
        category="location",
        difficulty="medium",
        sentence_with_blank="Lapset tulevat ___.",
        hint="koulut → koulu + i + sta",
        is_plural=True,
    ),
    CaseSentence(
        id="pl-loc-7",
        finnish="Ihmiset tulevat taloista.",
        english="People come from the houses.",
        case_used="elative",
        word_in_case="taloista",
        base_word="talot",
        category="location",
        difficulty="medium",
        sentence_with_blank="Ihmiset tulevat ___.",
        hint="talot → talo + i + sta",
        is_plural=True,
    ),
    CaseSentence(
        id="pl-loc-10",
        finnish="Lapset menevät kouluihin.",
        english="The children go to the schools.",
        case_used="illative",
        word_in_case="kouluihin",
        base_word="koulut",
        category="location",
        difficulty="hard",
        sentence_with_blank="Lapset menevät ___.",
        hint="koulut → koulu + i + hin",
        is_plural=True,
    ),
    CaseSentence(
        id="pl-loc-11",
        finnish="Ihmiset menevät taloihin.",
        english="People go into the houses.",
        case_used="illative",
        word_in_case="taloihin",
        base_word="talot",
        category="location",
        difficulty="hard",
        sentence_with_blank="Ihmiset menevät ___.",
        hint="talot → talo + i + hin",
        is_plural=True,
    ),
]


def get_singular_sentences() -> List[CaseSentence]:
    return [s for s in SENTENCES if not s.is_plural]


def get_plural_sentences() -> List[CaseSentence]:
    return [s for s in SENTENCES if s.is_plural]


def get_sentences_for_groups(groups: Iterable[str], plural: bool = False) -> List[CaseSentence]:
    """Return sentences whose case belongs to any of the selected groups."""
    wanted = set()
    for group in groups:
        wanted.update(CASE_GROUPS.get(group, ()))
    pool = get_plural_sentences() if plural else get_singular_sentences()
    return [s for s in pool if s.case_used in wanted]
