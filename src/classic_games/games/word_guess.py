"""
Word-guessing game implementation.

A word is drawn from the selected category; the player guesses letters
until the word is uncovered or MAX_TRIES misses are used up. Score, best
score and win streak carry over between rounds.
"""

from __future__ import annotations

import logging
import math
import string
from dataclasses import dataclass, replace
from typing import Dict, FrozenSet, Mapping, Optional, Sequence

from classic_games.core.rng import RandomSource
from classic_games.core.types import Difficulty, Status
from classic_games.games.game_base import GameBase
from classic_games.games.word_list import DEFAULT_CATEGORY, WORD_LIST, WordEntry

logger = logging.getLogger(__name__)

MAX_TRIES = 6
ALPHABET = frozenset(string.ascii_uppercase)

DIFFICULTY_MULTIPLIER: Dict[Difficulty, float] = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 1.5,
    Difficulty.HARD: 2,
}

# Gallows drawings indexed by number of misses
DRAWINGS = (
    "  +---+\n  |   |\n      |\n      |\n      |\n      |\n=========",
    "  +---+\n  |   |\n  O   |\n      |\n      |\n      |\n=========",
    "  +---+\n  |   |\n  O   |\n  |   |\n      |\n      |\n=========",
    "  +---+\n  |   |\n  O   |\n /|   |\n      |\n      |\n=========",
    "  +---+\n  |   |\n  O   |\n /|\\  |\n      |\n      |\n=========",
    "  +---+\n  |   |\n  O   |\n /|\\  |\n /    |\n      |\n=========",
    "  +---+\n  |   |\n  O   |\n /|\\  |\n / \\  |\n      |\n=========",
)


@dataclass(frozen=True)
class WordGuessState:
    category: str
    entry: WordEntry
    guessed_letters: FrozenSet[str] = frozenset()
    remaining_tries: int = MAX_TRIES
    status: Status = Status.PLAYING
    score: int = 0
    high_score: int = 0
    streak: int = 0
    hint_revealed: bool = False

    @property
    def word(self) -> str:
        return self.entry.word

    @property
    def hint(self) -> str:
        return self.entry.hint

    @property
    def difficulty(self) -> Difficulty:
        return self.entry.difficulty

    @property
    def mistakes(self) -> int:
        return MAX_TRIES - self.remaining_tries

    @property
    def is_solved(self) -> bool:
        return all(ch in self.guessed_letters for ch in self.word)

    @property
    def masked_word(self) -> str:
        """The word with unguessed letters shown as underscores."""
        return " ".join(ch if ch in self.guessed_letters else "_" for ch in self.word)


def word_score(word: str, remaining_tries: int, difficulty: Difficulty) -> int:
    """
    Points for solving a word:
        len * 10 * multiplier * remaining_tries / MAX_TRIES
    rounded half up.
    """
    raw = len(word) * 10 * DIFFICULTY_MULTIPLIER[difficulty] * (remaining_tries / MAX_TRIES)
    return int(math.floor(raw + 0.5))


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def draw_entry(words: Sequence[WordEntry], rng: RandomSource) -> WordEntry:
    return rng.choice(words)


def new_game(
    category: str,
    rng: RandomSource,
    word_list: Mapping[str, Sequence[WordEntry]] = WORD_LIST,
) -> WordGuessState:
    return WordGuessState(category=category, entry=draw_entry(word_list[category], rng))


def reset(
    state: WordGuessState,
    rng: RandomSource,
    word_list: Mapping[str, Sequence[WordEntry]] = WORD_LIST,
) -> WordGuessState:
    """New word from the current category; score, best and streak survive."""
    fresh = new_game(state.category, rng, word_list)
    return replace(fresh, score=state.score, high_score=state.high_score, streak=state.streak)


def select_category(
    state: WordGuessState,
    category: str,
    rng: RandomSource,
    word_list: Mapping[str, Sequence[WordEntry]] = WORD_LIST,
) -> WordGuessState:
    if category not in word_list:
        return state
    return reset(replace(state, category=category), rng, word_list)


def reset_stats(state: WordGuessState) -> WordGuessState:
    return replace(state, score=0, high_score=0, streak=0)


def reveal_hint(state: WordGuessState) -> WordGuessState:
    return replace(state, hint_revealed=True)


def guess_letter(state: WordGuessState, letter: str) -> WordGuessState:
    """Apply one letter guess. Invalid or repeated guesses change nothing."""
    if state.status is not Status.PLAYING:
        return state
    if not isinstance(letter, str) or len(letter) != 1:
        return state
    letter = letter.upper()
    if letter not in ALPHABET or letter in state.guessed_letters:
        return state

    guessed = state.guessed_letters | {letter}

    if letter not in state.word:
        remaining = state.remaining_tries - 1
        if remaining == 0:
            return replace(
                state,
                guessed_letters=guessed,
                remaining_tries=0,
                status=Status.LOST,
                streak=0,
            )
        return replace(state, guessed_letters=guessed, remaining_tries=remaining)

    state = replace(state, guessed_letters=guessed)
    if not state.is_solved:
        return state

    score = state.score + word_score(state.word, state.remaining_tries, state.difficulty)
    return replace(
        state,
        status=Status.WON,
        score=score,
        high_score=max(state.high_score, score),
        streak=state.streak + 1,
    )


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class WordGuess(GameBase):
    """Word-guessing engine holding the current snapshot."""

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        category: str = DEFAULT_CATEGORY,
        word_list: Mapping[str, Sequence[WordEntry]] = WORD_LIST,
    ):
        super().__init__(rng)
        if category not in word_list:
            available = ", ".join(word_list)
            raise ValueError(f"Unknown category: {category}. Available: {available}")
        self.word_list = word_list
        self.state = new_game(category, self.rng, word_list)

    def game_id(self) -> str:
        return "word_guess"

    @property
    def categories(self) -> Sequence[str]:
        return list(self.word_list)

    def get_state(self) -> WordGuessState:
        return self.state

    def set_state(self, state: WordGuessState) -> None:
        self.state = state

    def reset(self) -> None:
        self.state = reset(self.state, self.rng, self.word_list)

    def reset_stats(self) -> None:
        self.state = reset_stats(self.state)

    def reveal_hint(self) -> None:
        self.state = reveal_hint(self.state)

    def is_over(self) -> bool:
        return self.state.status is not Status.PLAYING

    def select_category(self, category: str) -> None:
        if category not in self.word_list:
            logger.debug("Ignoring unknown category %r", category)
            return
        self.state = select_category(self.state, category, self.rng, self.word_list)

    def guess_letter(self, letter: str) -> None:
        before = self.state
        self.state = guess_letter(before, letter)
        if self.state is before:
            logger.debug("Ignoring guess %r", letter)
        elif self.state.status is Status.WON:
            logger.info("Solved %s, score now %d", self.state.word, self.state.score)
        elif self.state.status is Status.LOST:
            logger.info("Out of tries on %s", self.state.word)

    def state_string(self) -> str:
        s = self.state
        lines = [
            DRAWINGS[s.mistakes],
            "",
            s.masked_word,
            "",
            f"Category: {s.category}  Difficulty: {s.difficulty.value}",
            f"Tries left: {s.remaining_tries}/{MAX_TRIES}",
            f"Score: {s.score}  Best: {s.high_score}  Streak: {s.streak}",
        ]
        if s.hint_revealed:
            lines.append(f"Hint: {s.hint}")
        if s.guessed_letters:
            lines.append("Guessed: " + " ".join(sorted(s.guessed_letters)))
        if s.status is Status.WON:
            lines.append("You won!")
        elif s.status is Status.LOST:
            lines.append(f"Game over! The word was {s.word}")
        return "\n".join(lines)
