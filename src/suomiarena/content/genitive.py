"""Genitive case words (singular and plural) grouped by formation rule."""
from typing import Iterable, List

from suomiarena.models.content_models import FormationRule, GenitiveWord

GENITIVE_RULES: List[FormationRule] = [
    FormationRule("single-vowel", "Single Vowel Ending", "Yksittäinen vokaali",
                  "Words ending in -a, -ä, -o, -ö, -u, -y",
                  "Add -n (watch for consonant gradation!); plural stem + -jen/-en"),
    FormationRule("two-vowels", "Two Vowel Ending", "Kaksi vokaalia",
                  "Words ending in long vowel or diphthong",
                  "Add -n; plural stem + -den/-iden"),
    FormationRule("new-i", "New -i Words", "Uudet i-sanat",
                  "Modern/borrowed words ending in -i",
                  "Add -n; plural stem + -en"),
    FormationRule("old-i", "Old -i Words", "Vanhat i-sanat",
                  "Traditional Finnish words ending in -i",
                  "Stem changes: -i → -e + n; plural stem + -en/-ien"),
    FormationRule("e-ending", "-e Ending Words", "E-loppuiset",
                  "Words ending in -e",
                  "Double the -e, add -n; plural stem + -iden/-tten"),
    FormationRule("consonant", "Consonant Ending", "Konsonanttiloppuiset",
                  "Words ending in consonants",
                  "Add stem vowel + -n; plural stem + -ten/-en"),
    FormationRule("nen-ending", "-nen Ending Words", "Nen-loppuiset",
                  "Words ending in -nen",
                  "Change -nen to -sen; plural -nen to -sten"),
]

GENITIVE_WORDS: List[GenitiveWord] = [
    GenitiveWord("talo", "talon", "talot", "talojen", "house", "single-vowel", "talo → talo + n"),
    GenitiveWord("koira", "koiran", "koirat", "koirien", "dog", "single-vowel", "koira → koira + n"),
    GenitiveWord("pöytä", "pöydän", "pöydät", "pöytien", "table", "single-vowel", "pöytä → pöydä + n (t→d)"),
    GenitiveWord("maa", "maan", "maat", "maiden", "country/ground", "two-vowels", "maa → maa + n"),
    GenitiveWord("puu", "puun", "puut", "puiden", "tree/wood", "two-vowels", "puu → puu + n"),
    GenitiveWord("bussi", "bussin", "bussit", "bussien", "bus", "new-i", "bussi → bussi + n"),
    GenitiveWord("taksi", "taksin", "taksit", "taksien", "taxi", "new-i", "taksi → taksi + n"),
    GenitiveWord("ovi", "oven", "ovet", "ovien", "door", "old-i", "ovi → ove + n (i→e)"),
    GenitiveWord("järvi", "järven", "järvet", "järvien", "lake", "old-i", "järvi → järve + n (i→e)"),
    GenitiveWord("huone", "huoneen", "huoneet", "huoneiden", "room", "e-ending", "huone → huonee + n"),
    GenitiveWord("perhe", "perheen", "perheet", "perheiden", "family", "e-ending", "perhe → perhee + n"),
    GenitiveWord("kysymys", "kysymyksen", "kysymykset", "kysymysten", "question", "consonant",
                 "kysymys → kysymykse + n"),
    GenitiveWord("vastaus", "vastauksen", "vastaukset", "vastausten", "answer", "consonant",
                 "vastaus → vastaukse + n"),
    GenitiveWord("nainen", "naisen", "naiset", "naisten", "woman", "nen-ending", "nainen → naise + n"),
    GenitiveWord("ihminen", "ihmisen", "ihmiset", "ihmisten", "human/person", "nen-ending",
                 "ihminen → ihmise + n"),
]


def get_words_for_rules(rules: Iterable[str]) -> List[GenitiveWord]:
    wanted = set(rules)
    return [w for w in GENITIVE_WORDS if w.rule in wanted]
