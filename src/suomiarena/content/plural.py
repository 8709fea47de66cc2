"""Nominative plural words grouped by formation rule."""
from typing import Iterable, List

from suomiarena.models.content_models import FormationRule, PluralWord

PLURAL_RULES: List[FormationRule] = [
    FormationRule("single-vowel", "Single Vowel Ending", "Yksittäinen vokaali",
                  "Words ending in -a, -ä, -o, -ö, -u, -y", "Add -t (watch for consonant gradation!)"),
    FormationRule("two-vowels", "Two Vowel Ending", "Kaksi vokaalia",
                  "Words ending in long vowel or diphthong", "Add -t"),
    FormationRule("new-i", "New -i Words", "Uudet i-sanat",
                  "Modern/borrowed words ending in -i", "Add -t (the i stays)"),
    FormationRule("old-i", "Old -i Words", "Vanhat i-sanat",
                  "Traditional Finnish words ending in -i", "Change -i to -e, then add -t"),
    FormationRule("e-ending", "-e Ending Words", "E-loppuiset",
                  "Words ending in -e", "Add -t (or -et after consonant gradation)"),
    FormationRule("consonant", "Consonant Ending", "Konsonanttiloppuiset",
                  "Words ending in consonants", "Add stem vowel + -t"),
    FormationRule("nen-ending", "-nen Ending Words", "Nen-loppuiset",
                  "Words ending in -nen", "Change -nen to -set"),
]

PLURAL_WORDS: List[PluralWord] = [
    PluralWord("talo", "talot", "house", "single-vowel", "talo → talo + t"),
    PluralWord("koira", "koirat", "dog", "single-vowel", "koira → koira + t"),
    PluralWord("pöytä", "pöydät", "table", "single-vowel", "pöytä → pöydä + t (t→d)"),
    PluralWord("maa", "maat", "country/ground", "two-vowels", "maa → maa + t"),
    PluralWord("puu", "puut", "tree/wood", "two-vowels", "puu → puu + t"),
    PluralWord("bussi", "bussit", "bus", "new-i", "bussi → bussi + t"),
    PluralWord("taksi", "taksit", "taxi", "new-i", "taksi → taksi + t"),
    PluralWord("ovi", "ovet", "door", "old-i", "ovi → ove + t (i→e)"),
    PluralWord("järvi", "järvet", "lake", "old-i", "järvi → järve + t (i→e)"),
    PluralWord("huone", "huoneet", "room", "e-ending", "huone → huonee + t"),
    PluralWord("perhe", "perheet", "family", "e-ending", "perhe → perhee + t"),
    PluralWord("kysymys", "kysymykset", "question", "consonant", "kysymys → kysymykse + t"),
    PluralWord("vastaus", "vastaukset", "answer", "consonant", "vastaus → vastaukse + t"),
    PluralWord("nainen", "naiset", "woman", "nen-ending", "nainen → nais + et"),
    PluralWord("ihminen", "ihmiset", "human/person", "nen-ending", "ihminen → ihmis + et"),
]


def get_words_for_rules(rules: Iterable[str]) -> List[PluralWord]:
    wanted = set(rules)
    return [w for w in PLURAL_WORDS if w.rule in wanted]
