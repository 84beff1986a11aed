import io
import random

import pytest

from wordmorph.config import WordMorphConfig
from wordmorph.errors import InvalidWord
from wordmorph.lexicon import Lexicon
from wordmorph.neighbors import EditMode
from wordmorph.session import GameSession, SessionState, compute_move_cap


@pytest.fixture
def settings() -> WordMorphConfig:
    return WordMorphConfig(
        _env_file=None,
        expansion_ceiling=10_000,
        cap_multiplier=3,
        default_allowed_lengths=[3, 4, 5],
        deterministic=True,
    )


@pytest.fixture
def session(small_lexicon, settings) -> GameSession:
    return GameSession(small_lexicon, settings)


def test_compute_move_cap():
    assert compute_move_cap("cat", "dog", multiplier=3) == 9
    assert compute_move_cap("cat", "coats", multiplier=3) == 15
    assert compute_move_cap("cat", "dog", multiplier=2) == 6


def test_state_defaults_from_settings(session):
    assert session.state.allowed_lengths == {3, 4, 5}
    assert session.state.mode is EditMode.CLASSIC
    assert not session.state.active


@pytest.mark.parametrize(
    "start,target,fragment",
    [
        ("c4t", "dog", "letters a-z"),
        ("at", "dog", "between 3 and 14"),
        ("cat", "cut", "Target word is not in the word list"),
        ("cut", "cat", "Start word is not in the word list"),
        ("cat", "cats", "same length"),
    ],
)
def test_validate_messages(session, start, target, fragment):
    assert fragment in session.validate(start, target)


def test_validate_allowed_lengths(session):
    session.toggle_length(4)
    assert "allowed lengths" in session.validate("cold", "warm")
    session.toggle_length(4)
    assert session.validate("cold", "warm") == ""


def test_validate_flex_allows_different_lengths(session):
    session.set_mode("flex")
    assert session.validate("Cat", "CATS") == ""


def test_start_game_sets_state(session):
    session.start_game("Cat", "dog")
    st = session.state
    assert st.path == ["cat"]
    assert st.target == "dog"
    assert st.move_cap == 9
    assert st.active
    assert session.current_word() == "cat"
    assert session.remaining_moves() == 9


def test_start_game_invalid_raises(session):
    with pytest.raises(InvalidWord):
        session.start_game("cat", "zzz")
    assert "not in the word list" in session.state.message
    assert not session.state.active


def test_play_to_target(session):
    session.start_game("cat", "dog")
    assert session.play("cot")
    assert session.play("dot")
    assert session.play("dog")
    assert session.state.solved
    assert not session.state.active
    assert session.state.message == "Reached the target!"
    assert session.state.moves_made == 3


def test_play_rejections(session):
    session.start_game("cat", "dog")
    assert not session.play("c@t")
    assert "letters a-z" in session.state.message
    assert not session.play("dog")
    assert "Illegal move" in session.state.message
    session.toggle_length(3)
    assert not session.play("cot")
    assert "allowed lengths" in session.state.message
    assert session.state.path == ["cat"]


def test_play_without_game(session):
    assert not session.play("cot")
    assert session.state.message == "No game in progress."


def test_play_respects_move_cap(small_lexicon):
    settings = WordMorphConfig(_env_file=None, cap_multiplier=1)
    session = GameSession(small_lexicon, settings)
    session.start_game("cat", "dog")  # cap 3
    assert session.play("bat")
    assert session.play("cat")
    assert session.play("cot")
    assert not session.play("dot")
    assert session.state.message == "Move cap exceeded."


def test_hint_and_apply_hint(session):
    session.start_game("cat", "dog")
    hint = session.hint()
    assert hint == "cot"  # the only neighbor of "cat" on a shortest path
    assert session.state.message == "Hint: cat -> cot"
    assert session.apply_hint()
    assert session.current_word() == "cot"


def test_hint_at_target(session):
    session.start_game("cat", "cot")
    session.play("cot")
    assert session.hint() is None
    assert session.state.message == "Already at the target."


def test_hint_not_found_within_remaining_moves(small_lexicon):
    session = GameSession(small_lexicon, WordMorphConfig(_env_file=None, cap_multiplier=1))
    session.start_game("cat", "dog")  # cap 3
    session.play("bat")
    session.play("bag")
    assert session.hint() is None
    assert "No path" in session.state.message


def test_hint_search_exceeded(small_lexicon):
    out = io.StringIO()
    settings = WordMorphConfig(_env_file=None, expansion_ceiling=1)
    session = GameSession(small_lexicon, settings, out=out)
    session.start_game("cold", "warm")
    assert session.hint() is None
    assert "too large" in session.state.message
    assert "Search exceeded" in out.getvalue()


def test_show_answer(session):
    session.start_game("cold", "warm")
    answer = session.show_answer()
    assert answer is not None
    assert answer[0] == "cold" and answer[-1] == "warm"
    assert session.state.answer == answer
    assert session.state.message == "Shortest path length: 4"


def test_show_answer_flex(session):
    session.set_mode(EditMode.FLEX)
    session.start_game("cat", "cats")
    assert session.show_answer() == ["cat", "cats"]


def test_show_answer_not_found(session):
    session.start_game("cat", "big")
    session.state.move_cap = 1
    assert session.show_answer() is None
    assert "No path found" in session.state.message


def test_show_answer_without_words(session):
    assert session.show_answer() is None
    assert "Choose a start" in session.state.message


def test_restart(session):
    session.start_game("cat", "dog")
    session.play("cot")
    session.restart()
    assert session.state.path == []
    assert not session.state.active
    assert session.current_word() == ""


def test_pick_random_pair_classic(session):
    session.state.allowed_lengths = {4}
    a, b = session.pick_random_pair(random.Random(3))
    assert len(a) == len(b) == 4
    assert a != b
    assert (session.state.start, session.state.target) == (a, b)
    session.start_game()
    assert session.state.path == [a]


def test_pick_random_pair_flex_uses_allowed_lengths(session):
    session.set_mode("flex")
    rng = random.Random(11)
    for _ in range(20):
        a, b = session.pick_random_pair(rng)
        assert len(a) in {3, 4} and len(b) in {3, 4}  # no 5-letter words


def test_pick_random_pair_no_words(session):
    session.state.allowed_lengths = {9}
    with pytest.raises(InvalidWord):
        session.pick_random_pair()


def test_select_word_toggles(session):
    assert session.select_word("cat") == "cat"
    assert session.select_word("dog") == "dog"
    assert session.select_word("dog") is None


def test_replace_lexicon(session):
    session.start_game("cat", "dog")
    old_generator = session.generator
    session.replace_lexicon(Lexicon.build("cat cut"))
    assert session.generator is not old_generator
    assert not session.state.active
    assert session.validate("cat", "cut") == ""


def test_explicit_state_is_used(small_lexicon, settings):
    state = SessionState(mode=EditMode.FLEX, allowed_lengths={3, 4})
    session = GameSession(small_lexicon, settings, state=state)
    session.start_game("cat", "cats")
    assert state.path == ["cat"]
    assert state.move_cap == 12


def test_pick_random_pair_sorts_each_bucket_once(settings, monkeypatch):
    lexicon = Lexicon.build("cold")  # a single word forces every redraw
    session = GameSession(lexicon, settings)
    session.state.allowed_lengths = {4}
    calls: list[int] = []
    original = lexicon.words_of_length

    def counting(length: int):
        calls.append(length)
        return original(length)

    monkeypatch.setattr(lexicon, "words_of_length", counting)

    assert session.pick_random_pair(random.Random(0)) == ("cold", "cold")
    assert calls == [4, 4]  # availability check, then one sorted bucket
