"""Pikkusanat: the small filler words that make sentences flow."""
from typing import Dict, Iterable, List

from suomiarena.models.content_models import Pikkusana

PIKKUSANA_CATEGORIES: Dict[str, Dict[str, str]] = {
    "conjunctions": {"name": "Conjunctions", "finnish_name": "Konjunktiot", "description": "Words that connect clauses and sentences"},
    "adverbs": {"name": "Adverbs", "finnish_name": "Adverbit", "description": "Words that modify verbs, adjectives, or other adverbs"},
    "particles": {"name": "Particles", "finnish_name": "Partikkelit", "description": "Small words that add nuance and emotion"},
    "prepositions": {"name": "Pre/Postpositions", "finnish_name": "Pre/Postpositiot", "description": "Words that show relationships between nouns"},
    "pronouns": {"name": "Pronouns", "finnish_name": "Pronominit", "description": "Words that replace or refer to nouns"},
    "question-particles": {"name": "Question Words", "finnish_name": "Kysymyspartikkelit", "description": "Words used in forming questions"},
    "intensifiers": {"name": "Intensifiers", "finnish_name": "Vahvistussanat", "description": "Words that strengthen or weaken meaning"},
    "negation": {"name": "Negation", "finnish_name": "Kieltosanat", "description": "Words used for negation and denial"},
    "time-expressions": {"name": "Time Expressions", "finnish_name": "Ajanilmaukset", "description": "Words related to time"},
    "fillers": {"name": "Fillers & Discourse", "finnish_name": "Täytesanat", "description": "Conversational fillers and discourse markers"},
}

PIKKUSANAT: List[Pikkusana] = [
    Pikkusana("ja", "and", "conjunctions", "Minä ja sinä.", "Me and you."),
    Pikkusana("sekä", "as well as, both...and", "conjunctions", "Sekä hän että minä.", "Both he and I."),
    Pikkusana("mutta", "but", "conjunctions", "Haluan, mutta en voi.", "I want to, but I can’t."),
    Pikkusana("nyt", "now", "adverbs", "Tule nyt!", "Come now!"),
    Pikkusana("sitten", "then, later", "adverbs", "Nähdään sitten!", "See you later!"),
    Pikkusana("jo", "already", "adverbs", "Olen jo syönyt.", "I’ve already eaten."),
    Pikkusana("no", "well, so", "particles", "No niin!", "Well then!"),
    Pikkusana("niin", "yes, so, indeed", "particles", "Niin minäkin.", "Me too."),
    Pikkusana("kai", "I suppose, probably", "particles", "Hän on kai sairas.", "I suppose he’s sick."),
    Pikkusana("kanssa", "with", "prepositions", "Ystävän kanssa.", "With a friend."),
    Pikkusana("ilman", "without", "prepositions", "Ilman sinua.", "Without you."),
    Pikkusana("ennen", "before", "prepositions", "Ennen ruokaa.", "Before food."),
    Pikkusana("se", "it, that", "pronouns", "Se on hyvä.", "That’s good."),
    Pikkusana("tämä", "this", "pronouns", "Tämä on minun.", "This is mine."),
    Pikkusana("tuo", "that (over there)", "pronouns", "Tuo on kaunis.", "That one is beautiful."),
    Pikkusana("-ko/-kö", "(yes/no question marker)", "question-particles", "Tuletko?", "Are you coming?"),
    Pikkusana("vai", "or (in questions)", "question-particles", "Kahvi vai tee?", "Coffee or tea?"),
    Pikkusana("entä", "what about, and", "question-particles", "Entä sinä?", "What about you?"),
    Pikkusana("hyvin", "very", "intensifiers", "Hyvin hyvä!", "Very good!"),
    Pikkusana("todella", "really, truly", "intensifiers", "Todella kaunis!", "Really beautiful!"),
    Pikkusana("tosi", "really, very (informal)", "intensifiers", "Tosi hyvä!", "Really good!"),
    Pikkusana("ei", "no, not", "negation", "Ei saa!", "Not allowed!"),
    Pikkusana("en", "I don’t/am not", "negation", "En tiedä.", "I don’t know."),
    Pikkusana("et", "you don’t (singular)", "negation", "Et ymmärrä.", "You don’t understand."),
    Pikkusana("eilen", "yesterday", "time-expressions", "Eilen satoi.", "It rained yesterday."),
    Pikkusana("tänään", "today", "time-expressions", "Tänään on maanantai.", "Today is Monday."),
    Pikkusana("huomenna", "tomorrow", "time-expressions", "Nähdään huomenna!", "See you tomorrow!"),
    Pikkusana("siis", "so, therefore, I mean", "fillers", "Siis... mitä sanoit?", "So... what did you say?"),
    Pikkusana("tuota", "um, well", "fillers", "Tuota... en tiedä.", "Um... I don’t know."),
    Pikkusana("niinku", "like, you know", "fillers", "Se on niinku... vaikea.", "It’s like... difficult."),
]


def get_words_for_categories(categories: Iterable[str]) -> List[Pikkusana]:
    wanted = set(categories)
    return [w for w in PIKKUSANAT if w.category in wanted]
