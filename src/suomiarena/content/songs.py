"""Song lyrics broken into lines and glossed words."""
from typing import Iterable, List, Optional

from suomiarena.models.content_models import Song, SongLine, SongWord

SONGS: List[Song] = [
    Song(
        id="sisko-tahtoo-humalaan",
        title="Sisko tahtoo humalaan",
        artist="Happoradio",
        difficulty="intermediate",
        lines=(
            SongLine(
                finnish="Tässä talossa seinät ovat paperia",
                english="In this house the walls are (made of) paper",
                words=(
                    SongWord("tässä", "in this", "pronoun", "inessive of tämä"),
                    SongWord("talossa", "in the house", "noun", "inessive case", "talo"),
                    SongWord("seinät", "walls", "noun", "plural nominative", "seinä"),
                    SongWord("ovat", "are", "verb", "he form of olla", "olla"),
                    SongWord("paperia", "paper", "noun", "partitive singular", "paperi"),
                ),
            ),
            SongLine(
                finnish="Mä katson seitsemättä kertaa kelloa",
                english="I look at the clock for the seventh time",
                words=(
                    SongWord("mä", "I", "pronoun", "colloquial minä"),
                    SongWord("katson", "I look at", "verb", "present tense", "katsoa"),
                    SongWord("seitsemättä", "seventh", "numeral", "partitive ordinal", "seitsemäs"),
                    SongWord("kertaa", "time", "noun", "partitive singular", "kerta"),
                    SongWord("kelloa", "clock", "noun", "partitive singular", "kello"),
                ),
            ),
            SongLine(
                finnish="Ja yritän silmäni ummistaa",
                english="And I try to close my eyes",
                words=(
                    SongWord("ja", "and", "conjunction"),
                    SongWord("yritän", "I try", "verb", "present tense", "yrittää"),
                    SongWord("silmäni", "my eyes", "noun", "possessive suffix", "silmä"),
                    SongWord("ummistaa", "to close", "verb", "infinitive"),
                ),
            ),
            SongLine(
                finnish="Mutten mielestä saa sitä elokuvaa",
                english="But I can't get that movie out of my mind",
                words=(
                    SongWord("mutten", "but I don't", "conjunction", "mutta + en"),
                    SongWord("mielestä", "from (my) mind", "noun", "elative case", "mieli"),
                    SongWord("saa", "get/can", "verb", "present tense", "saada"),
                    SongWord("sitä", "that", "pronoun", "partitive of se"),
                    SongWord("elokuvaa", "movie", "noun", "partitive singular", "elokuva"),
                ),
            ),
            SongLine(
                finnish="Joka lopulta päättyikin sitten niin",
                english="Which in the end did end up like",
                words=(
                    SongWord("joka", "which", "pronoun"),
                    SongWord("lopulta", "in the end", "adverb", "ablative of loppu"),
                    SongWord("päättyikin", "did end", "verb", "imperfect + -kin", "päättyä"),
                    SongWord("sitten", "then", "adverb"),
                    SongWord("niin", "so/like", "adverb"),
                ),
            ),
        ),
    ),
]


def get_song(song_id: str) -> Optional[Song]:
    return next((s for s in SONGS if s.id == song_id), None)


def get_song_words(song: Song) -> List[SongWord]:
    """Return the unique words of a song in order of first appearance."""
    seen = set()
    words = []
    for line in song.lines:
        for word in line.words:
            key = word.finnish.lower()
            if key not in seen:
                seen.add(key)
                words.append(word)
    return words


def get_words_for_songs(song_ids: Iterable[str]) -> List[SongWord]:
    """Return the unique words of the given songs, skipping unknown and repeated ids."""
    words = []
    for song_id in dict.fromkeys(song_ids):
        song = get_song(song_id)
        if song is not None:
            words.extend(get_song_words(song))
    return words


def find_line(word: SongWord) -> Optional[SongLine]:
    """Return the first line that contains a word, for context in feedback."""
    for song in SONGS:
        for line in song.lines:
            if word in line.words:
                return line
    return None
