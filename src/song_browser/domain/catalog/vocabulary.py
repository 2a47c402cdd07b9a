"""
Static vocabulary tables for the genre/tag classifier.

Kept apart from the classification rules so the tables can be tested on their
own and replaced by a curated mapping later. All entries are lowercase.
"""

import re

# Recognised genre and style names
GENRE_VOCABULARY = frozenset({
    "pop", "rock", "hip hop", "hip-hop", "r&b", "rnb", "soul", "funk", "jazz",
    "blues", "country", "classical", "reggae", "ska", "punk", "metal",
    "electronic", "edm", "dance", "house", "techno", "trance", "drum and bass",
    "dnb", "dubstep", "indie", "alternative", "folk", "acoustic", "ballad",
    "ambient", "soundtrack", "opera", "musical", "gospel", "latin", "salsa",
    "merengue", "bachata", "reggaeton", "afrobeat", "amapiano", "bhangra",
    "bollywood", "k-pop", "kpop", "j-pop", "jpop", "c-pop", "cpop", "cantopop",
    "mandopop", "eurodance", "synthpop", "new wave", "grunge", "shoegaze", "emo",
    "trap", "drill", "grime", "uk garage", "2-step", "2 step", "trip hop",
    "nu metal", "hard rock", "soft rock", "progressive rock", "prog rock",
    "post-rock", "post rock", "disco", "boogie", "lo-fi", "lo fi", "lofi",
    "chillout", "chill", "downtempo", "breakbeat", "new jack swing", "britpop",
    "motown", "psychedelic", "psychedelic rock", "garage rock", "garage",
    "bluegrass", "industrial", "electropop", "dream pop",
})

# Nationality, demographic and meta terms that describe rather than categorise
TAG_VOCABULARY = frozenset({
    "british", "english", "scottish", "welsh", "irish", "american", "canadian",
    "australian", "new zealand", "jamaican", "male", "female", "male vocalists",
    "female vocalists", "singer-songwriter", "singer songwriters",
    "singer-songwriters", "vocalists", "uk", "us", "gb", "european",
    "latin american", "british pop",
})

NATIONALITY_ADJECTIVES = (
    "british", "english", "scottish", "welsh", "irish", "american", "canadian",
    "australian", "jamaican", "uk", "us",
)

VOCALIST_PATTERN = re.compile(r"vocalists?|singers?")

# 1990s, 2000s, 90s
DECADE_PATTERN = re.compile(r"\b19\d0s\b|\b20\d0s\b|\b\d{2}s\b")

# Trailing boundary only, so "famous" and "Jesus" count as nationality mentions
NATIONALITY_PATTERN = re.compile(r"(?:" + "|".join(NATIONALITY_ADJECTIVES) + r")\b")
