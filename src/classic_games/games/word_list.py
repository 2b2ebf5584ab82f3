"""
Word catalogue for the word-guessing game.

Words use the A-Z alphabet only.
"""

from typing import Dict, NamedTuple, Tuple

from classic_games.core.types import Difficulty

EASY, MEDIUM, HARD = Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD


class WordEntry(NamedTuple):
    word: str
    hint: str
    difficulty: Difficulty


DEFAULT_CATEGORY = "animals"

WORD_LIST: Dict[str, Tuple[WordEntry, ...]] = {
    "animals": (
        WordEntry("ELEPHANT", "Largest land mammal with a trunk", EASY),
        WordEntry("PENGUIN", "Flightless bird that loves the cold", EASY),
        WordEntry("GIRAFFE", "Tallest land animal with a long neck", EASY),
        WordEntry("PLATYPUS", "Egg-laying mammal with a duck bill", MEDIUM),
        WordEntry("CHAMELEON", "Reptile that changes color", HARD),
    ),
    "celebrities": (
        WordEntry("BEYONCE", "Queen B, famous singer", EASY),
        WordEntry("DICAPRIO", "Titanic actor who finally won an Oscar", MEDIUM),
        WordEntry("SPIELBERG", "Director of Jurassic Park and E.T.", MEDIUM),
        WordEntry("ZENDAYA", "Euphoria and Spider-Man actress", EASY),
        WordEntry("SCHWARZENEGGER", "I'll be back", HARD),
    ),
    "movies": (
        WordEntry("INCEPTION", "Dream within a dream", MEDIUM),
        WordEntry("AVATAR", "Blue aliens on Pandora", EASY),
        WordEntry("INTERSTELLAR", "Space travel through a black hole", HARD),
        WordEntry("JAWS", "Dangerous shark", EASY),
        WordEntry("PULPFICTION", "Quentin Tarantino's masterpiece", MEDIUM),
    ),
    "sports": (
        WordEntry("BASKETBALL", "Slam dunk sport", MEDIUM),
        WordEntry("TENNIS", "Love means zero", EASY),
        WordEntry("VOLLEYBALL", "Beach sport with a net", MEDIUM),
        WordEntry("CRICKET", "Popular in India and England", EASY),
        WordEntry("BADMINTON", "Shuttlecock sport", MEDIUM),
    ),
    "food": (
        WordEntry("SPAGHETTI", "Italian noodles", MEDIUM),
        WordEntry("SUSHI", "Japanese raw fish dish", EASY),
        WordEntry("GUACAMOLE", "Avocado-based dip", HARD),
        WordEntry("PIZZA", "Italian pie with toppings", EASY),
        WordEntry("CROISSANT", "French crescent-shaped pastry", MEDIUM),
    ),
}
