"""Game session: the player's current path, the move cap, and hint/answer requests."""

import random
from dataclasses import dataclass, field
from typing import TextIO

from wordmorph.config import WordMorphConfig
from wordmorph.config import config as wm_config
from wordmorph.errors import InvalidWord, SearchExceeded
from wordmorph.lexicon import MAX_LEN, MIN_LEN, Lexicon, sanitize_word
from wordmorph.neighbors import EditMode, NeighborGenerator
from wordmorph.search import search
from wordmorph.util import int_comma, path_str


@dataclass(kw_only=True)
class SessionState:
    """Everything the UI needs to render a game."""

    mode: EditMode = EditMode.CLASSIC
    """Active edit mode."""

    allowed_lengths: set[int] = field(
        default_factory=lambda: set(wm_config.default_allowed_lengths)
    )
    """Word lengths the player may use (for start, target and every move)."""

    start: str = ""
    target: str = ""

    path: list[str] = field(default_factory=list)
    """Words played so far, starting with `start`."""

    move_cap: int = 0
    """Maximum number of moves for the current game."""

    active: bool = False
    """Whether a game is in progress."""

    answer: list[str] | None = None
    """Shortest path shown by `show_answer`, if any."""

    message: str = ""
    """Status message for the player."""

    selected_word: str | None = None
    """Word whose gloss the player asked to see."""

    @property
    def moves_made(self) -> int:
        return max(0, len(self.path) - 1)

    @property
    def solved(self) -> bool:
        return bool(self.path) and self.path[-1] == self.target


def compute_move_cap(a: str, b: str, *, multiplier: int | None = None) -> int:
    """Move cap for a game from `a` to `b`: a multiple of the longer word's length."""
    if multiplier is None:
        multiplier = wm_config.cap_multiplier
    return multiplier * max(len(a), len(b))


class GameSession:
    """Drive a game over a shared, read-only Lexicon."""

    def __init__(
        self,
        lexicon: Lexicon,
        settings: WordMorphConfig | None = None,
        *,
        state: SessionState | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.settings = settings or wm_config
        self.lexicon = lexicon
        self.generator = NeighborGenerator(lexicon)
        self.state = state or SessionState(
            allowed_lengths=set(self.settings.default_allowed_lengths)
        )
        self.out = out

    def _log(self, msg: str) -> None:
        if self.out is not None:
            print(msg, file=self.out, flush=True)

    def find_path(self, start: str, target: str, move_cap: int) -> list[str] | None:
        """Search under the session mode and settings.  Raises SearchExceeded."""
        neighbor_fn = self.generator.neighbor_fn(
            self.state.mode, deterministic=self.settings.deterministic
        )
        return search(
            start,
            target,
            neighbor_fn,
            move_cap,
            self.settings.expansion_ceiling,
            heuristic=self.state.mode.heuristic,
        )

    # Setup

    def replace_lexicon(self, lexicon: Lexicon) -> None:
        """Swap in a new word list; all pattern indexes are rebuilt lazily."""
        self.lexicon = lexicon
        self.generator = NeighborGenerator(lexicon)
        self.restart()
        self._log(f"Word list replaced: {int_comma(lexicon.total_count())} words")

    def set_mode(self, mode: EditMode | str) -> None:
        self.state.mode = EditMode.parse(mode)

    def toggle_length(self, length: int) -> None:
        """Allow `length` if it is disallowed, or disallow it if it is allowed."""
        if length in self.state.allowed_lengths:
            self.state.allowed_lengths.discard(length)
        else:
            self.state.allowed_lengths.add(length)

    def validate(self, start: str, target: str) -> str:
        """Check a start/target pair.

        Returns:
            "" if the pair is valid, else a message describing the first problem found.
        """
        sa, sb = sanitize_word(start), sanitize_word(target)
        if not sa or not sb:
            return "Start and target words must consist of letters a-z only."
        if not (MIN_LEN <= len(sa) <= MAX_LEN and MIN_LEN <= len(sb) <= MAX_LEN):
            return f"Word length must be between {MIN_LEN} and {MAX_LEN}."
        allowed = self.state.allowed_lengths
        if len(sa) not in allowed or len(sb) not in allowed:
            return "Start/target length is not among the allowed lengths."
        if not self.lexicon.contains(sa):
            return f"Start word is not in the word list: {sa}"
        if not self.lexicon.contains(sb):
            return f"Target word is not in the word list: {sb}"
        if self.state.mode == EditMode.CLASSIC and len(sa) != len(sb):
            return "Classic mode requires start and target of the same length."
        return ""

    def pick_random_pair(self, rng: random.Random | None = None) -> tuple[str, str]:
        """Pick a random start/target pair from the allowed lengths and set it on the state."""
        rng = rng or random.Random()
        lengths = sorted(L for L in self.state.allowed_lengths if self.lexicon.words_of_length(L))
        if not lengths:
            raise InvalidWord("No words available: load a word list or adjust allowed lengths.")

        buckets = {L: sorted(self.lexicon.words_of_length(L)) for L in lengths}

        def pick(length: int) -> str:
            return rng.choice(buckets[length])

        if self.state.mode == EditMode.CLASSIC:
            length = rng.choice(lengths)
            a = pick(length)
            b = pick(length)
            attempts = 0
            while b == a and attempts < self.settings.random_pair_attempts:
                b = pick(length)
                attempts += 1
        else:
            a = pick(rng.choice(lengths))
            b = pick(rng.choice(lengths))

        self.state.start, self.state.target = a, b
        return a, b

    # Play

    def start_game(self, start: str | None = None, target: str | None = None) -> None:
        """Start a new game.

        Raises:
            InvalidWord: If the start/target pair fails validation.
        """
        start = self.state.start if start is None else start
        target = self.state.target if target is None else target
        err = self.validate(start, target)
        if err:
            self.state.message = err
            raise InvalidWord(err)

        st = self.state
        st.start, st.target = sanitize_word(start), sanitize_word(target)
        st.path = [st.start]
        st.move_cap = compute_move_cap(
            st.start, st.target, multiplier=self.settings.cap_multiplier
        )
        st.active = True
        st.answer = None
        st.message = ""
        st.selected_word = None
        self._log(f"New game: {st.start} -> {st.target} ({st.mode.value}, cap {st.move_cap})")

    def restart(self) -> None:
        """Abandon the current game."""
        st = self.state
        st.path = []
        st.active = False
        st.answer = None
        st.message = ""
        st.selected_word = None

    def current_word(self) -> str:
        return self.state.path[-1] if self.state.path else ""

    def remaining_moves(self) -> int:
        return max(0, self.state.move_cap - self.state.moves_made)

    def play(self, word: str) -> bool:
        """Play `word` as the next move.

        Returns:
            Whether the move was accepted.  On rejection, `state.message` says why.
        """
        st = self.state
        if not st.path:
            st.message = "No game in progress."
            return False
        nxt = sanitize_word(word)
        if not nxt:
            st.message = "Please enter a word made of letters a-z."
            return False
        if len(nxt) not in st.allowed_lengths:
            st.message = "That word's length is not among the allowed lengths."
            return False
        if not self.generator.is_legal_move(self.current_word(), nxt, st.mode):
            st.message = (
                "Illegal move: the word must be one allowed edit away and in the word list."
            )
            return False
        if st.moves_made + 1 > st.move_cap:
            st.message = "Move cap exceeded."
            return False

        st.path.append(nxt)
        st.selected_word = None
        if nxt == st.target:
            st.message = "Reached the target!"
            st.active = False
            self._log(f"Solved in {st.moves_made} moves: {path_str(st.path)}")
        else:
            st.message = ""
        return True

    def hint(self) -> str | None:
        """Suggest the next word on a shortest path to the target within the remaining moves."""
        st = self.state
        cur = self.current_word()
        if not cur:
            return None
        try:
            path = self.find_path(cur, st.target, self.remaining_moves())
        except SearchExceeded as e:
            self._log(str(e))
            st.message = (
                "Hint search space too large: narrow the allowed lengths or pick closer words."
            )
            return None
        if path is None:
            st.message = "No path to the target within the remaining moves."
            return None
        if len(path) <= 1:
            st.message = "Already at the target."
            return None
        st.message = f"Hint: {cur} -> {path[1]}"
        return path[1]

    def apply_hint(self) -> bool:
        """Play the hinted word, if there is one."""
        nxt = self.hint()
        return nxt is not None and self.play(nxt)

    def show_answer(self) -> list[str] | None:
        """Search for a shortest path from the start word within the full move cap."""
        st = self.state
        st.message = ""
        if not st.start or not st.target:
            st.message = "Choose a start and target word first."
            return None
        try:
            path = self.find_path(st.start, st.target, st.move_cap)
        except SearchExceeded as e:
            self._log(str(e))
            st.message = "Search space too large: narrow the allowed lengths or pick closer words."
            return None
        if path is None:
            st.message = (
                "No path found within the move cap (there may be none, "
                "or the cap or allowed lengths need relaxing)."
            )
            return None
        st.answer = path
        st.message = f"Shortest path length: {len(path) - 1}"
        self._log(f"Answer: {path_str(path)}")
        return path

    def select_word(self, word: str) -> str | None:
        """Select `word` for gloss lookup, or deselect it if it is already selected."""
        st = self.state
        st.selected_word = None if st.selected_word == word else word
        return st.selected_word
