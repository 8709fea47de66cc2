"""Verb conjugation tables (types 1-6)."""
from typing import Dict, Iterable, List, Optional

from suomiarena.models.content_models import Verb

PERSONS = ("minä", "sinä", "hän", "me", "te", "he")

BLANK = "___"

VERB_TYPE_INFO: Dict[int, Dict[str, str]] = {
    1: {
        "name": "Type 1 (puhua)",
        "rule": "Remove -a/-ä from infinitive to get stem. Add personal endings: -n, -t, -V, -mme, -tte, -vat/-vät",
    },
    2: {
        "name": "Type 2 (syödä)",
        "rule": "Remove -da/-dä from infinitive. Stem ends in vowel. Add: -n, -t, -∅, -mme, -tte, -vät",
    },
    3: {
        "name": "Type 3 (tulla)",
        "rule": "Remove -la/-lä, -na/-nä, -ra/-rä, or -sta/-stä. Add -e- before endings",
    },
    4: {
        "name": "Type 4 (haluta)",
        "rule": "Remove -ta/-tä. Add -a-/-ä- before endings",
    },
    5: {
        "name": "Type 5 (tarvita)",
        "rule": "Remove -ta/-tä. Add -tse- before endings",
    },
    6: {
        "name": "Type 6 (vanheta)",
        "rule": "Remove -ta/-tä. Add -ne- before endings",
    },
}

# Sentence endings used to give each conjugation question some context.
# Imperatives have no subject pronoun, so their templates carry the blank themselves.
SENTENCE_ENDINGS: Dict[str, List[str]] = {
    "present": ["joka päivä.", "kotona.", "paljon."],
    "negative": ["koskaan.", "tänään."],
    "imperfect": ["eilen.", "viime viikolla."],
    "imperfect_negative": ["eilen.", "viime viikolla."],
    "conditional": ["huomenna.", "varmasti."],
    "conditional_negative": ["huomenna.", "varmasti."],
    "conditional_perfect": ["eilen.", "silloin."],
    "conditional_perfect_negative": ["eilen.", "silloin."],
}

IMPERATIVE_TEMPLATES: Dict[str, List[str]] = {
    "imperative": [f"{BLANK} nyt!", f"{BLANK} heti!"],
    "imperative_negative": [f"{BLANK} sitä!", f"{BLANK} nyt!"],
}

VERBS: List[Verb] = [
    Verb(
        infinitive="puhua", type=1, translation="to speak",
        synonyms=("speak", "talk"),
        forms={
            "present": {"minä": "puhun", "sinä": "puhut", "hän": "puhuu", "me": "puhumme", "te": "puhutte", "he": "puhuvat"},
            "negative": {"minä": "en puhu", "sinä": "et puhu", "hän": "ei puhu", "me": "emme puhu", "te": "ette puhu", "he": "eivät puhu"},
            "imperfect": {"minä": "puhuin", "sinä": "puhuit", "hän": "puhui", "me": "puhuimme", "te": "puhuitte", "he": "puhuivat"},
            "imperfect_negative": {"minä": "en puhunut", "sinä": "et puhunut", "hän": "ei puhunut", "me": "emme puhuneet", "te": "ette puhuneet", "he": "eivät puhuneet"},
            "imperative": {"sinä": "puhu", "me": "puhukaamme", "te": "puhukaa"},
            "imperative_negative": {"sinä": "älä puhu", "me": "älkäämme puhuko", "te": "älkää puhuko"},
            "conditional": {"minä": "puhuisin", "sinä": "puhuisit", "hän": "puhuisi", "me": "puhuisimme", "te": "puhuisitte", "he": "puhuisivat"},
            "conditional_negative": {"minä": "en puhuisi", "sinä": "et puhuisi", "hän": "ei puhuisi", "me": "emme puhuisi", "te": "ette puhuisi", "he": "eivät puhuisi"},
            "conditional_perfect": {"minä": "olisin puhunut", "sinä": "olisit puhunut", "hän": "olisi puhunut", "me": "olisimme puhuneet", "te": "olisitte puhuneet", "he": "olisivat puhuneet"},
            "conditional_perfect_negative": {"minä": "en olisi puhunut", "sinä": "et olisi puhunut", "hän": "ei olisi puhunut", "me": "emme olisi puhuneet", "te": "ette olisi puhuneet", "he": "eivät olisi puhuneet"},
        },
    ),
    Verb(
        infinitive="lukea", type=1, translation="to read",
        synonyms=("read",),
        forms={
            "present": {"minä": "luen", "sinä": "luet", "hän": "lukee", "me": "luemme", "te": "luette", "he": "lukevat"},
            "negative": {"minä": "en lue", "sinä": "et lue", "hän": "ei lue", "me": "emme lue", "te": "ette lue", "he": "eivät lue"},
            "imperfect": {"minä": "luin", "sinä": "luit", "hän": "luki", "me": "luimme", "te": "luitte", "he": "lukivat"},
            "imperfect_negative": {"minä": "en lukenut", "sinä": "et lukenut", "hän": "ei lukenut", "me": "emme lukeneet", "te": "ette lukeneet", "he": "eivät lukeneet"},
            "imperative": {"sinä": "lue", "me": "lukekaamme", "te": "lukekaa"},
            "imperative_negative": {"sinä": "älä lue", "me": "älkäämme lukeko", "te": "älkää lukeko"},
            "conditional": {"minä": "lukisin", "sinä": "lukisit", "hän": "lukisi", "me": "lukisimme", "te": "lukisitte", "he": "lukisivat"},
            "conditional_negative": {"minä": "en lukisi", "sinä": "et lukisi", "hän": "ei lukisi", "me": "emme lukisi", "te": "ette lukisi", "he": "eivät lukisi"},
            "conditional_perfect": {"minä": "olisin lukenut", "sinä": "olisit lukenut", "hän": "olisi lukenut", "me": "olisimme lukeneet", "te": "olisitte lukeneet", "he": "olisivat lukeneet"},
            "conditional_perfect_negative": {"minä": "en olisi lukenut", "sinä": "et olisi lukenut", "hän": "ei olisi lukenut", "me": "emme olisi lukeneet", "te": "ette olisi lukeneet", "he": "eivät olisi lukeneet"},
        },
    ),
    Verb(
        infinitive="syödä", type=2, translation="to eat",
        synonyms=("eat",),
        forms={
            "present": {"minä": "syön", "sinä": "syöt", "hän": "syö", "me": "syömme", "te": "syötte", "he": "syövät"},
            "negative": {"minä": "en syö", "sinä": "et syö", "hän": "ei syö", "me": "emme syö", "te": "ette syö", "he": "eivät syö"},
            "imperfect": {"minä": "söin", "sinä": "söit", "hän": "söi", "me": "söimme", "te": "söitte", "he": "söivät"},
            "imperfect_negative": {"minä": "en syönyt", "sinä": "et syönyt", "hän": "ei syönyt", "me": "emme syöneet", "te": "ette syöneet", "he": "eivät syöneet"},
            "imperative": {"sinä": "syö", "me": "syökäämme", "te": "syökää"},
            "imperative_negative": {"sinä": "älä syö", "me": "älkäämme syökö", "te": "älkää syökö"},
            "conditional": {"minä": "söisin", "sinä": "söisit", "hän": "söisi", "me": "söisimme", "te": "söisitte", "he": "söisivät"},
            "conditional_negative": {"minä": "en söisi", "sinä": "et söisi", "hän": "ei söisi", "me": "emme söisi", "te": "ette söisi", "he": "eivät söisi"},
            "conditional_perfect": {"minä": "olisin syönyt", "sinä": "olisit syönyt", "hän": "olisi syönyt", "me": "olisimme syöneet", "te": "olisitte syöneet", "he": "olisivat syöneet"},
            "conditional_perfect_negative": {"minä": "en olisi syönyt", "sinä": "et olisi syönyt", "hän": "ei olisi syönyt", "me": "emme olisi syöneet", "te": "ette olisi syöneet", "he": "eivät olisi syöneet"},
        },
    ),
    Verb(
        infinitive="juoda", type=2, translation="to drink",
        synonyms=("drink",),
        forms={
            "present": {"minä": "juon", "sinä": "juot", "hän": "juo", "me": "juomme", "te": "juotte", "he": "juovat"},
            "negative": {"minä": "en juo", "sinä": "et juo", "hän": "ei juo", "me": "emme juo", "te": "ette juo", "he": "eivät juo"},
            "imperfect": {"minä": "join", "sinä": "joit", "hän": "joi", "me": "joimme", "te": "joitte", "he": "joivat"},
            "imperfect_negative": {"minä": "en juonut", "sinä": "et juonut", "hän": "ei juonut", "me": "emme juoneet", "te": "ette juoneet", "he": "eivät juoneet"},
            "imperative": {"sinä": "juo", "me": "juokaamme", "te": "juokaa"},
            "imperative_negative": {"sinä": "älä juo", "me": "älkäämme juoko", "te": "älkää juoko"},
            "conditional": {"minä": "joisin", "sinä": "joisit", "hän": "joisi", "me": "joisimme", "te": "joisitte", "he": "joisivat"},
            "conditional_negative": {"minä": "en joisi", "sinä": "et joisi", "hän": "ei joisi", "me": "emme joisi", "te": "ette joisi", "he": "eivät joisi"},
            "conditional_perfect": {"minä": "olisin juonut", "sinä": "olisit juonut", "hän": "olisi juonut", "me": "olisimme juoneet", "te": "olisitte juoneet", "he": "olisivat juoneet"},
            "conditional_perfect_negative": {"minä": "en olisi juonut", "sinä": "et olisi juonut", "hän": "ei olisi juonut", "me": "emme olisi juoneet", "te": "ette olisi juoneet", "he": "eivät olisi juoneet"},
        },
    ),
    Verb(
        infinitive="olla", type=3, translation="to be",
        synonyms=("be",),
        forms={
            "present": {"minä": "olen", "sinä": "olet", "hän": "on", "me": "olemme", "te": "olette", "he": "ovat"},
            "negative": {"minä": "en ole", "sinä": "et ole", "hän": "ei ole", "me": "emme ole", "te": "ette ole", "he": "eivät ole"},
            "imperfect": {"minä": "olin", "sinä": "olit", "hän": "oli", "me": "olimme", "te": "olitte", "he": "olivat"},
            "imperfect_negative": {"minä": "en ollut", "sinä": "et ollut", "hän": "ei ollut", "me": "emme olleet", "te": "ette olleet", "he": "eivät olleet"},
            "imperative": {"sinä": "ole", "me": "olkaamme", "te": "olkaa"},
            "imperative_negative": {"sinä": "älä ole", "me": "älkäämme olko", "te": "älkää olko"},
            "conditional": {"minä": "olisin", "sinä": "olisit", "hän": "olisi", "me": "olisimme", "te": "olisitte", "he": "olisivat"},
            "conditional_negative": {"minä": "en olisi", "sinä": "et olisi", "hän": "ei olisi", "me": "emme olisi", "te": "ette olisi", "he": "eivät olisi"},
            "conditional_perfect": {"minä": "olisin ollut", "sinä": "olisit ollut", "hän": "olisi ollut", "me": "olisimme olleet", "te": "olisitte olleet", "he": "olisivat olleet"},
            "conditional_perfect_negative": {"minä": "en olisi ollut", "sinä": "et olisi ollut", "hän": "ei olisi ollut", "me": "emme olisi olleet", "te": "ette olisi olleet", "he": "eivät olisi olleet"},
        },
    ),
    Verb(
        infinitive="tulla", type=3, translation="to come",
        synonyms=("come",),
        forms={
            "present": {"minä": "tulen", "sinä": "tulet", "hän": "tulee", "me": "tulemme", "te": "tulette", "he": "tulevat"},
            "negative": {"minä": "en tule", "sinä": "et tule", "hän": "ei tule", "me": "emme tule", "te": "ette tule", "he": "eivät tule"},
            "imperfect": {"minä": "tulin", "sinä": "tulit", "hän": "tuli", "me": "tulimme", "te": "tulitte", "he": "tulivat"},
            "imperfect_negative": {"minä": "en tullut", "sinä": "et tullut", "hän": "ei tullut", "me": "emme tulleet", "te": "ette tulleet", "he": "eivät tulleet"},
            "imperative": {"sinä": "tule", "me": "tulkaamme", "te": "tulkaa"},
            "imperative_negative": {"sinä": "älä tule", "me": "älkäämme tulko", "te": "älkää tulko"},
            "conditional": {"minä": "tulisin", "sinä": "tulisit", "hän": "tulisi", "me": "tulisimme", "te": "tulisitte", "he": "tulisivat"},
            "conditional_negative": {"minä": "en tulisi", "sinä": "et tulisi", "hän": "ei tulisi", "me": "emme tulisi", "te": "ette tulisi", "he": "eivät tulisi"},
            "conditional_perfect": {"minä": "olisin tullut", "sinä": "olisit tullut", "hän": "olisi tullut", "me": "olisimme tulleet", "te": "olisitte tulleet", "he": "olisivat tulleet"},
            "conditional_perfect_negative": {"minä": "en olisi tullut", "sinä": "et olisi tullut", "hän": "ei olisi tullut", "me": "emme olisi tulleet", "te": "ette olisi tulleet", "he": "eivät olisi tulleet"},
        },
    ),
    Verb(
        infinitive="mennä", type=3, translation="to go",
        synonyms=("go",),
        forms={
            "present": {"minä": "menen", "sinä": "menet", "hän": "menee", "me": "menemme", "te": "menette", "he": "menevät"},
            "negative": {"minä": "en mene", "sinä": "et mene", "hän": "ei mene", "me": "emme mene", "te": "ette mene", "he": "eivät mene"},
            "imperfect": {"minä": "menin", "sinä": "menit", "hän": "meni", "me": "menimme", "te": "menitte", "he": "menivät"},
            "imperfect_negative": {"minä": "en mennyt", "sinä": "et mennyt", "hän": "ei mennyt", "me": "emme menneet", "te": "ette menneet", "he": "eivät menneet"},
            "imperative": {"sinä": "mene", "me": "menkäämme", "te": "menkää"},
            "imperative_negative": {"sinä": "älä mene", "me": "älkäämme menkö", "te": "älkää menkö"},
            "conditional": {"minä": "menisin", "sinä": "menisit", "hän": "menisi", "me": "menisimme", "te": "menisitte", "he": "menisivät"},
            "conditional_negative": {"minä": "en menisi", "sinä": "et menisi", "hän": "ei menisi", "me": "emme menisi", "te": "ette menisi", "he": "eivät menisi"},
            "conditional_perfect": {"minä": "olisin mennyt", "sinä": "olisit mennyt", "hän": "olisi mennyt", "me": "olisimme menneet", "te": "olisitte menneet", "he": "olisivat menneet"},
            "conditional_perfect_negative": {"minä": "en olisi mennyt", "sinä": "et olisi mennyt", "hän": "ei olisi mennyt", "me": "emme olisi menneet", "te": "ette olisi menneet", "he": "eivät olisi menneet"},
        },
    ),
    Verb(
        infinitive="haluta", type=4, translation="to want",
        synonyms=("want",),
        forms={
            "present": {"minä": "haluan", "sinä": "haluat", "hän": "haluaa", "me": "haluamme", "te": "haluatte", "he": "haluavat"},
            "negative": {"minä": "en halua", "sinä": "et halua", "hän": "ei halua", "me": "emme halua", "te": "ette halua", "he": "eivät halua"},
            "imperfect": {"minä": "halusin", "sinä": "halusit", "hän": "halusi", "me": "halusimme", "te": "halusitte", "he": "halusivat"},
            "imperfect_negative": {"minä": "en halunnut", "sinä": "et halunnut", "hän": "ei halunnut", "me": "emme halunneet", "te": "ette halunneet", "he": "eivät halunneet"},
            "imperative": {"sinä": "halua", "me": "halutkaamme", "te": "halutkaa"},
            "imperative_negative": {"sinä": "älä halua", "me": "älkäämme halutko", "te": "älkää halutko"},
            "conditional": {"minä": "haluaisin", "sinä": "haluaisit", "hän": "haluaisi", "me": "haluaisimme", "te": "haluaisitte", "he": "haluaisivat"},
            "conditional_negative": {"minä": "en haluaisi", "sinä": "et haluaisi", "hän": "ei haluaisi", "me": "emme haluaisi", "te": "ette haluaisi", "he": "eivät haluaisi"},
            "conditional_perfect": {"minä": "olisin halunnut", "sinä": "olisit halunnut", "hän": "olisi halunnut", "me": "olisimme halunneet", "te": "olisitte halunneet", "he": "olisivat halunneet"},
            "conditional_perfect_negative": {"minä": "en olisi halunnut", "sinä": "et olisi halunnut", "hän": "ei olisi halunnut", "me": "emme olisi halunneet", "te": "ette olisi halunneet", "he": "eivät olisi halunneet"},
        },
    ),
    Verb(
        infinitive="tavata", type=4, translation="to meet",
        synonyms=("meet",),
        forms={
            "present": {"minä": "tapaan", "sinä": "tapaat", "hän": "tapaa", "me": "tapaamme", "te": "tapaatte", "he": "tapaavat"},
            "negative": {"minä": "en tapaa", "sinä": "et tapaa", "hän": "ei tapaa", "me": "emme tapaa", "te": "ette tapaa", "he": "eivät tapaa"},
            "imperfect": {"minä": "tapasin", "sinä": "tapasit", "hän": "tapasi", "me": "tapasimme", "te": "tapasitte", "he": "tapasivat"},
            "imperfect_negative": {"minä": "en tavannut", "sinä": "et tavannut", "hän": "ei tavannut", "me": "emme tavanneet", "te": "ette tavanneet", "he": "eivät tavanneet"},
            "imperative": {"sinä": "tapaa", "me": "tavatkaamme", "te": "tavatkaa"},
            "imperative_negative": {"sinä": "älä tapaa", "me": "älkäämme tavatko", "te": "älkää tavatko"},
            "conditional": {"minä": "tapaisin", "sinä": "tapaisit", "hän": "tapaisi", "me": "tapaisimme", "te": "tapaisitte", "he": "tapaisivat"},
            "conditional_negative": {"minä": "en tapaisi", "sinä": "et tapaisi", "hän": "ei tapaisi", "me": "emme tapaisi", "te": "ette tapaisi", "he": "eivät tapaisi"},
            "conditional_perfect": {"minä": "olisin tavannut", "sinä": "olisit tavannut", "hän": "olisi tavannut", "me": "olisimme tavanneet", "te": "olisitte tavanneet", "he": "olisivat tavanneet"},
            "conditional_perfect_negative": {"minä": "en olisi tavannut", "sinä": "et olisi tavannut", "hän": "ei olisi tavannut", "me": "emme olisi tavanneet", "te": "ette olisi tavanneet", "he": "eivät olisi tavanneet"},
        },
    ),
    Verb(
        infinitive="tarvita", type=5, translation="to need",
        synonyms=("need",),
        forms={
            "present": {"minä": "tarvitsen", "sinä": "tarvitset", "hän": "tarvitsee", "me": "tarvitsemme", "te": "tarvitsette", "he": "tarvitsevat"},
            "negative": {"minä": "en tarvitse", "sinä": "et tarvitse", "hän": "ei tarvitse", "me": "emme tarvitse", "te": "ette tarvitse", "he": "eivät tarvitse"},
            "imperfect": {"minä": "tarvitsin", "sinä": "tarvitsit", "hän": "tarvitsi", "me": "tarvitsimme", "te": "tarvitsitte", "he": "tarvitsivat"},
            "imperfect_negative": {"minä": "en tarvinnut", "sinä": "et tarvinnut", "hän": "ei tarvinnut", "me": "emme tarvinneet", "te": "ette tarvinneet", "he": "eivät tarvinneet"},
            "imperative": {"sinä": "tarvitse", "me": "tarvitkaamme", "te": "tarvitkaa"},
            "imperative_negative": {"sinä": "älä tarvitse", "me": "älkäämme tarvitko", "te": "älkää tarvitko"},
            "conditional": {"minä": "tarvitsisin", "sinä": "tarvitsisit", "hän": "tarvitsisi", "me": "tarvitsisimme", "te": "tarvitsisitte", "he": "tarvitsisivat"},
            "conditional_negative": {"minä": "en tarvitsisi", "sinä": "et tarvitsisi", "hän": "ei tarvitsisi", "me": "emme tarvitsisi", "te": "ette tarvitsisi", "he": "eivät tarvitsisi"},
            "conditional_perfect": {"minä": "olisin tarvinnut", "sinä": "olisit tarvinnut", "hän": "olisi tarvinnut", "me": "olisimme tarvinneet", "te": "olisitte tarvinneet", "he": "olisivat tarvinneet"},
            "conditional_perfect_negative": {"minä": "en olisi tarvinnut", "sinä": "et olisi tarvinnut", "hän": "ei olisi tarvinnut", "me": "emme olisi tarvinneet", "te": "ette olisi tarvinneet", "he": "eivät olisi tarvinneet"},
        },
    ),
    Verb(
        infinitive="valita", type=5, translation="to choose",
        synonyms=("choose", "select"),
        forms={
            "present": {"minä": "valitsen", "sinä": "valitset", "hän": "valitsee", "me": "valitsemme", "te": "valitsette", "he": "valitsevat"},
            "negative": {"minä": "en valitse", "sinä": "et valitse", "hän": "ei valitse", "me": "emme valitse", "te": "ette valitse", "he": "eivät valitse"},
            "imperfect": {"minä": "valitsin", "sinä": "valitsit", "hän": "valitsi", "me": "valitsimme", "te": "valitsitte", "he": "valitsivat"},
            "imperfect_negative": {"minä": "en valinnut", "sinä": "et valinnut", "hän": "ei valinnut", "me": "emme valinneet", "te": "ette valinneet", "he": "eivät valinneet"},
            "imperative": {"sinä": "valitse", "me": "valitkaamme", "te": "valitkaa"},
            "imperative_negative": {"sinä": "älä valitse", "me": "älkäämme valitko", "te": "älkää valitko"},
            "conditional": {"minä": "valitsisin", "sinä": "valitsisit", "hän": "valitsisi", "me": "valitsisimme", "te": "valitsisitte", "he": "valitsisivat"},
            "conditional_negative": {"minä": "en valitsisi", "sinä": "et valitsisi", "hän": "ei valitsisi", "me": "emme valitsisi", "te": "ette valitsisi", "he": "eivät valitsisi"},
            "conditional_perfect": {"minä": "olisin valinnut", "sinä": "olisit valinnut", "hän": "olisi valinnut", "me": "olisimme valinneet", "te": "olisitte valinneet", "he": "olisivat valinneet"},
            "conditional_perfect_negative": {"minä": "en olisi valinnut", "sinä": "et olisi valinnut", "hän": "ei olisi valinnut", "me": "emme olisi valinneet", "te": "ette olisi valinneet", "he": "eivät olisi valinneet"},
        },
    ),
    Verb(
        infinitive="vanheta", type=6, translation="to age, to grow old",
        synonyms=("age", "grow old", "get older"),
        forms={
            "present": {"minä": "vanhenen", "sinä": "vanhenet", "hän": "vanhenee", "me": "vanhenemme", "te": "vanhenette", "he": "vanhenevat"},
            "negative": {"minä": "en vanhene", "sinä": "et vanhene", "hän": "ei vanhene", "me": "emme vanhene", "te": "ette vanhene", "he": "eivät vanhene"},
            "imperfect": {"minä": "vanhenin", "sinä": "vanhenit", "hän": "vanheni", "me": "vanhenimme", "te": "vanhenitte", "he": "vanhenivat"},
            "imperfect_negative": {"minä": "en vanhennut", "sinä": "et vanhennut", "hän": "ei vanhennut", "me": "emme vanhenneet", "te": "ette vanhenneet", "he": "eivät vanhenneet"},
            "imperative": {"sinä": "vanhene", "me": "vanhetkaamme", "te": "vanhetkaa"},
            "imperative_negative": {"sinä": "älä vanhene", "me": "älkäämme vanhetko", "te": "älkää vanhetko"},
            "conditional": {"minä": "vanhenisin", "sinä": "vanhenisit", "hän": "vanhenisi", "me": "vanhenisimme", "te": "vanhenisitte", "he": "vanhenisivat"},
            "conditional_negative": {"minä": "en vanhenisi", "sinä": "et vanhenisi", "hän": "ei vanhenisi", "me": "emme vanhenisi", "te": "ette vanhenisi", "he": "eivät vanhenisi"},
            "conditional_perfect": {"minä": "olisin vanhennut", "sinä": "olisit vanhennut", "hän": "olisi vanhennut", "me": "olisimme vanhenneet", "te": "olisitte vanhenneet", "he": "olisivat vanhenneet"},
            "conditional_perfect_negative": {"minä": "en olisi vanhennut", "sinä": "et olisi vanhennut", "hän": "ei olisi vanhennut", "me": "emme olisi vanhenneet", "te": "ette olisi vanhenneet", "he": "eivät olisi vanhenneet"},
        },
    ),
    Verb(
        infinitive="lämmetä", type=6, translation="to warm up",
        synonyms=("warm up", "get warm", "heat up"),
        forms={
            "present": {"minä": "lämpenen", "sinä": "lämpenet", "hän": "lämpenee", "me": "lämpenemme", "te": "lämpenette", "he": "lämpenevät"},
            "negative": {"minä": "en lämpene", "sinä": "et lämpene", "hän": "ei lämpene", "me": "emme lämpene", "te": "ette lämpene", "he": "eivät lämpene"},
            "imperfect": {"minä": "lämpenin", "sinä": "lämpenit", "hän": "lämpeni", "me": "lämpenimme", "te": "lämpenitte", "he": "lämpenivät"},
            "imperfect_negative": {"minä": "en lämmennyt", "sinä": "et lämmennyt", "hän": "ei lämmennyt", "me": "emme lämmenneet", "te": "ette lämmenneet", "he": "eivät lämmenneet"},
            "imperative": {"sinä": "lämpene", "me": "lämmetkäämme", "te": "lämmetkää"},
            "imperative_negative": {"sinä": "älä lämpene", "me": "älkäämme lämmetkö", "te": "älkää lämmetkö"},
            "conditional": {"minä": "lämpenisin", "sinä": "lämpenisit", "hän": "lämpenisi", "me": "lämpenisimme", "te": "lämpenisitte", "he": "lämpenisivät"},
            "conditional_negative": {"minä": "en lämpenisi", "sinä": "et lämpenisi", "hän": "ei lämpenisi", "me": "emme lämpenisi", "te": "ette lämpenisi", "he": "eivät lämpenisi"},
            "conditional_perfect": {"minä": "olisin lämmennyt", "sinä": "olisit lämmennyt", "hän": "olisi lämmennyt", "me": "olisimme lämmenneet", "te": "olisitte lämmenneet", "he": "olisivat lämmenneet"},
            "conditional_perfect_negative": {"minä": "en olisi lämmennyt", "sinä": "et olisi lämmennyt", "hän": "ei olisi lämmennyt", "me": "emme olisi lämmenneet", "te": "ette olisi lämmenneet", "he": "eivät olisi lämmenneet"},
        },
    ),
]


def get_verbs_for_types(types: Iterable[int]) -> List[Verb]:
    """Return all verbs of the given conjugation types."""
    wanted = set(types)
    return [verb for verb in VERBS if verb.type in wanted]


def get_verb(infinitive: str) -> Optional[Verb]:
    """Look up a verb by its infinitive."""
    for verb in VERBS:
        if verb.infinitive == infinitive:
            return verb
    return None


def sentence_templates(tense: str, person: str) -> List[str]:
    """Return the sentence templates for a tense and person."""
    if tense in IMPERATIVE_TEMPLATES:
        return IMPERATIVE_TEMPLATES[tense]
    return [f"{person.capitalize()} {BLANK} {ending}" for ending in SENTENCE_ENDINGS.get(tense, ["."])]
