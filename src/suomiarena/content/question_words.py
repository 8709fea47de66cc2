"""Question words (kysymyssanat) grouped by what they ask for."""
from typing import Dict, Iterable, List

from suomiarena.models.content_models import QuestionWord

QUESTION_CATEGORIES: Dict[str, Dict[str, str]] = {
    "what": {"name": "What", "finnish_name": "Mitä/Mikä", "description": "Questions about things, objects, and concepts"},
    "who": {"name": "Who", "finnish_name": "Kuka", "description": "Questions about people and identity"},
    "where": {"name": "Where", "finnish_name": "Missä/Minne", "description": "Questions about location and direction"},
    "when": {"name": "When", "finnish_name": "Milloin", "description": "Questions about time"},
    "how": {"name": "How", "finnish_name": "Miten", "description": "Questions about manner, method, and description"},
    "why": {"name": "Why", "finnish_name": "Miksi", "description": "Questions about reasons and causes"},
    "which": {"name": "Which", "finnish_name": "Mikä/Kumpi", "description": "Questions about choice and selection"},
    "whose": {"name": "Whose", "finnish_name": "Kenen", "description": "Questions about possession"},
    "how-much": {"name": "How much/many", "finnish_name": "Paljonko", "description": "Questions about quantity and amount"},
}

QUESTION_WORDS: List[QuestionWord] = [
    QuestionWord(
        finnish="mikä",
        english="what / which (one)",
        category="what",
        usage="Asks about identity or selection (subject/nominative)",
        example="Mikä tämä on?",
        example_translation="What is this?",
        case_required="nominative",
        alternatives=("what", "which"),
    ),
    QuestionWord(
        finnish="mitä",
        english="what (object)",
        category="what",
        usage="Asks about the object of an action (partitive)",
        example="Mitä sinä teet?",
        example_translation="What are you doing?",
        case_required="partitive",
        alternatives=("what",),
    ),
    QuestionWord(
        finnish="minkä",
        english="what / which (accusative)",
        category="what",
        usage="Asks about a specific object (genitive/accusative)",
        example="Minkä kirjan ostat?",
        example_translation="Which book are you buying?",
        case_required="genitive",
        alternatives=("which", "what"),
    ),
    QuestionWord(
        finnish="kuka",
        english="who (subject)",
        category="who",
        usage="Asks about a person (nominative)",
        example="Kuka tulee?",
        example_translation="Who is coming?",
        case_required="nominative",
        alternatives=("who",),
    ),
    QuestionWord(
        finnish="ketä",
        english="who / whom (object)",
        category="who",
        usage="Asks about the object person (partitive)",
        example="Ketä sinä rakastat?",
        example_translation="Who do you love?",
        case_required="partitive",
        alternatives=("whom", "who"),
    ),
    QuestionWord(
        finnish="kenet",
        english="who / whom (specific)",
        category="who",
        usage="Asks about a specific person (accusative)",
        example="Kenet kutsut juhliin?",
        example_translation="Who will you invite to the party?",
        case_required="accusative",
        alternatives=("whom", "who"),
    ),
    QuestionWord(
        finnish="missä",
        english="where (static location)",
        category="where",
        usage="Asks about current location (inside)",
        example="Missä asut?",
        example_translation="Where do you live?",
        case_required="inessive",
        alternatives=("where", "in which place"),
    ),
    QuestionWord(
        finnish="mistä",
        english="where from / from where",
        category="where",
        usage="Asks about origin/starting point (from inside)",
        example="Mistä olet kotoisin?",
        example_translation="Where are you from?",
        case_required="elative",
        alternatives=("from where", "where from"),
    ),
    QuestionWord(
        finnish="mihin",
        english="where to (inside)",
        category="where",
        usage="Asks about destination (going inside)",
        example="Mihin menet?",
        example_translation="Where are you going?",
        case_required="illative",
        alternatives=("to where", "where to"),
    ),
    QuestionWord(
        finnish="milloin",
        english="when",
        category="when",
        usage="Asks about time (general)",
        example="Milloin tulet?",
        example_translation="When are you coming?",
        alternatives=("when", "at what time"),
    ),
    QuestionWord(
        finnish="koska",
        english="when / at what time",
        category="when",
        usage="Asks about specific time",
        example="Koska kokous alkaa?",
        example_translation="When does the meeting start?",
        alternatives=("when", "at what time"),
    ),
    QuestionWord(
        finnish="mihin aikaan",
        english="at what time",
        category="when",
        usage="Asks about specific clock time",
        example="Mihin aikaan heräät?",
        example_translation="At what time do you wake up?",
        alternatives=("what time", "at what time"),
    ),
    QuestionWord(
        finnish="miten",
        english="how (manner)",
        category="how",
        usage="Asks about manner or method",
        example="Miten tämä toimii?",
        example_translation="How does this work?",
        alternatives=("how", "in what way"),
    ),
    QuestionWord(
        finnish="kuinka",
        english="how",
        category="how",
        usage="Asks about manner (more formal)",
        example="Kuinka voit?",
        example_translation="How are you?",
        alternatives=("how",),
    ),
    QuestionWord(
        finnish="millainen",
        english="what kind of / what is it like",
        category="how",
        usage="Asks about characteristics/type",
        example="Millainen päivä sinulla oli?",
        example_translation="What kind of day did you have?",
        alternatives=("what kind", "what type", "what like"),
    ),
    QuestionWord(
        finnish="miksi",
        english="why",
        category="why",
        usage="Asks about reason (general)",
        example="Miksi olet myöhässä?",
        example_translation="Why are you late?",
        alternatives=("why", "for what reason"),
    ),
    QuestionWord(
        finnish="minkä takia",
        english="because of what / why",
        category="why",
        usage="Asks about cause (more emphatic)",
        example="Minkä takia et soittanut?",
        example_translation="Why didn’t you call?",
        alternatives=("why", "for what reason", "because of what"),
    ),
    QuestionWord(
        finnish="minkä vuoksi",
        english="for what reason / why",
        category="why",
        usage="Asks about reason (formal)",
        example="Minkä vuoksi hän lähti?",
        example_translation="For what reason did he leave?",
        alternatives=("why", "for what reason"),
    ),
    QuestionWord(
        finnish="kumpi",
        english="which (of two)",
        category="which",
        usage="Asks to choose between two options",
        example="Kumpi on parempi?",
        example_translation="Which (of the two) is better?",
        alternatives=("which one", "which of two"),
    ),
    QuestionWord(
        finnish="kumpaa",
        english="which (of two) - object",
        category="which",
        usage="Asks to choose between two (partitive)",
        example="Kumpaa haluat?",
        example_translation="Which (of the two) do you want?",
        case_required="partitive",
        alternatives=("which one",),
    ),
    QuestionWord(
        finnish="kenen",
        english="whose",
        category="whose",
        usage="Asks about ownership/possession",
        example="Kenen tämä on?",
        example_translation="Whose is this?",
        case_required="genitive",
        alternatives=("whose",),
    ),
    QuestionWord(
        finnish="keiden",
        english="whose (plural)",
        category="whose",
        usage="Asks about ownership by multiple people",
        example="Keiden laukut nämä ovat?",
        example_translation="Whose bags are these?",
        case_required="genitive plural",
        alternatives=("whose",),
    ),
    QuestionWord(
        finnish="paljonko",
        english="how much",
        category="how-much",
        usage="Asks about amount/price",
        example="Paljonko tämä maksaa?",
        example_translation="How much does this cost?",
        alternatives=("how much",),
    ),
    QuestionWord(
        finnish="kuinka paljon",
        english="how much",
        category="how-much",
        usage="Asks about quantity (formal)",
        example="Kuinka paljon rahaa tarvitset?",
        example_translation="How much money do you need?",
        alternatives=("how much",),
    ),
    QuestionWord(
        finnish="montako",
        english="how many",
        category="how-much",
        usage="Asks about countable number",
        example="Montako lasta sinulla on?",
        example_translation="How many children do you have?",
        alternatives=("how many",),
    ),
]


def get_words_for_categories(categories: Iterable[str]) -> List[QuestionWord]:
    wanted = set(categories)
    return [w for w in QUESTION_WORDS if w.category in wanted]
