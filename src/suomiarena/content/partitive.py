"""Partitive case words grouped by formation rule."""
from typing import Iterable, List, Optional

from suomiarena.models.content_models import FormationRule, PartitiveWord

PARTITIVE_RULES: List[FormationRule] = [
    FormationRule(
        id="single-vowel",
        name="Single Vowel Ending",
        finnish_name="Yksittäinen vokaali",
        description="Words ending in -a, -ä, -o, -ö, -u, -y (single vowel)",
        formation="Add -a or -ä (double the final vowel)",
    ),
    FormationRule(
        id="two-vowels",
        name="Two Vowel Ending",
        finnish_name="Kaksi vokaalia",
        description="Words ending in long vowel or diphthong (-aa, -uu, -ie, -uo, -ea, etc.)",
        formation="Add -ta/-tä for same vowels, -a/-ä for different vowels",
    ),
    FormationRule(
        id="new-i",
        name="New -i Words",
        finnish_name="Uudet i-sanat",
        description="Modern/borrowed words ending in -i",
        formation="Add -a or -ä (the i stays)",
    ),
    FormationRule(
        id="old-i",
        name="Old -i Words",
        finnish_name="Vanhat i-sanat",
        description="Traditional Finnish words ending in -i",
        formation="Stem changes: -i becomes -e- or drops, then add ending",
    ),
    FormationRule(
        id="e-ending",
        name="-e Ending Words",
        finnish_name="E-loppuiset",
        description="Words ending in -e",
        formation="Add -tta or -ttä",
    ),
    FormationRule(
        id="consonant",
        name="Consonant Ending",
        finnish_name="Konsonanttiloppuiset",
        description="Words ending in consonants (-s, -n, -l, -r, -t)",
        formation="Add -ta or -tä (may have stem changes)",
    ),
    FormationRule(
        id="nen-ending",
        name="-nen Ending Words",
        finnish_name="Nen-loppuiset",
        description="Words ending in -nen (adjectives & nouns)",
        formation="Change -nen to -s, then add -ta/-tä",
    ),
]

PARTITIVE_WORDS: List[PartitiveWord] = [
    # single vowel: add -a/-ä
    PartitiveWord("talo", "taloa", "house", "single-vowel", "talo → talo + a", "taloja"),
    PartitiveWord("koira", "koiraa", "dog", "single-vowel", "koira → koira + a", "koiria"),
    PartitiveWord("kissa", "kissaa", "cat", "single-vowel", "kissa → kissa + a", "kissoja"),
    PartitiveWord("kirja", "kirjaa", "book", "single-vowel", "kirja → kirja + a", "kirjoja"),
    # two vowels: add -ta/-tä
    PartitiveWord("maa", "maata", "country/ground", "two-vowels", "maa → maa + ta", "maita"),
    PartitiveWord("puu", "puuta", "tree/wood", "two-vowels", "puu → puu + ta", "puita"),
    # new -i words
    PartitiveWord("bussi", "bussia", "bus", "new-i", "bussi → bussi + a", "busseja"),
    PartitiveWord("taksi", "taksia", "taxi", "new-i", "taksi → taksi + a", "takseja"),
    # old -i words
    PartitiveWord("vesi", "vettä", "water", "old-i", "vet- + tä (si→t doubles)", "vesiä"),
    PartitiveWord("meri", "merta", "sea", "old-i", "mer- + ta", "meriä"),
    # -e ending
    PartitiveWord("huone", "huonetta", "room", "e-ending", "huone → huone + tta", "huoneita"),
    PartitiveWord("perhe", "perhettä", "family", "e-ending", "perhe → perhe + ttä", "perheitä"),
    # consonant ending
    PartitiveWord("kysymys", "kysymystä", "question", "consonant", "kysymys → kysymys + tä", "kysymyksiä"),
    PartitiveWord("vastaus", "vastausta", "answer", "consonant", "vastaus → vastaus + ta", "vastauksia"),
    # -nen ending
    PartitiveWord("nainen", "naista", "woman", "nen-ending", "nais- + ta (nen→s)", "naisia"),
    PartitiveWord("ihminen", "ihmistä", "human/person", "nen-ending", "ihmis- + tä (nen→s)", "ihmisiä"),
]


def get_rule_info(rule: str) -> Optional[FormationRule]:
    return next((r for r in PARTITIVE_RULES if r.id == rule), None)


def get_words_for_rules(rules: Iterable[str], plural: bool = False) -> List[PartitiveWord]:
    """Return the words formed by any of the given rules.

    With ``plural`` only words that carry a partitive plural are returned.
    """
    wanted = set(rules)
    return [
        w for w in PARTITIVE_WORDS
        if w.rule in wanted and (not plural or w.partitive_plural)
    ]
