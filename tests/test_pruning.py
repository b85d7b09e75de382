import pytest

from wordfit.constraints import ConstraintState
from wordfit.errors import ContradictionError, InputFormatError
from wordfit.solver import WordleSolver, enumerate_assignments, filter_candidates, solve
from wordfit.vocab import WordVocab

# Small controlled pool so the tests don't depend on a CSV
POOL = [
    "apple", "zebra", "crane", "total", "stoal", "allot", "tally",
    "alloy", "atoll", "tangy", "mangy", "rangy", "angry", "tango",
]


@pytest.fixture
def solver():
    return WordleSolver(WordVocab(POOL))


def test_correct_position_picks_apple():
    assert solve(correct_positions="a1", words=["apple", "zebra", "crane"]) == ["apple"]


def test_absent_letters_drop_only_words_containing_them():
    # "zebra" has a "z", so only "apple" survives
    assert solve(doesnt_contain="xyz", words=["apple", "zebra"]) == ["apple"]
    assert solve(doesnt_contain="xyz", words=["apple", "crane"]) == ["apple", "crane"]


def test_excluded_and_present_is_empty(solver):
    assert solver.solve(doesnt_contain="a", contains="a") == []


def test_strict_mode_raises_on_contradiction():
    strict = WordleSolver(WordVocab(POOL), strict=True)
    with pytest.raises(ContradictionError):
        strict.solve(doesnt_contain="a", contains="a")


def test_empty_dictionary_never_matches():
    empty = WordleSolver(WordVocab([]))
    assert empty.solve() == []
    assert empty.solve(correct_positions="a1") == []
    assert empty.solve_one(doesnt_contain="xyz") is None


def test_no_constraints_returns_whole_dictionary_in_order(solver):
    assert solver.solve() == POOL


def test_only_once_rejects_double_letters(solver):
    assert solver.solve(contains="l", contains_only_once="l") == ["apple", "total", "stoal"]
    assert solver.solve(contains_only_once="l") == ["apple", "total", "stoal"]
    assert solver.solve(contains="l") == ["apple", "total", "stoal", "allot", "tally", "alloy", "atoll"]


def test_invalid_positions_keep_letter_elsewhere(solver):
    assert solver.solve(contains="t", invalid_positions="t1t5") == ["stoal", "atoll"]


def test_two_letters_fixed_at_same_slot_is_empty(solver):
    assert solver.solve(correct_positions="a1t1") == []


def test_mixed_feedback_example(solver):
    kwargs = dict(
        doesnt_contain="shvecirodm",
        contains="agn",
        invalid_positions="a3a5a4g1",
        correct_positions="n3a2g4y5",
    )
    assert solver.solve(**kwargs) == ["tangy"]
    assert solver.solve_one(**kwargs) == "tangy"


def test_malformed_input_raises_before_search(solver):
    with pytest.raises(InputFormatError):
        solver.solve(correct_positions="a9")
    with pytest.raises(InputFormatError):
        solver.solve(contains="A")


@pytest.mark.parametrize(
    "signals",
    [
        {},
        {"doesnt_contain": "e"},
        {"contains": "ta", "invalid_positions": "t1"},
        {"contains_only_once": "l", "doesnt_contain": "z"},
        {"correct_positions": "a1", "contains": "y"},
        {"invalid_positions": "a1n2", "contains": "n"},
        {"doesnt_contain": "a", "contains": "a"},
    ],
)
def test_vectorized_scan_and_backtracking_agree(solver, signals):
    state = ConstraintState.from_signals(**signals)
    reference = filter_candidates(POOL, state)

    assert solver.candidates(state) == reference
    searched = list(enumerate_assignments(state, accept=solver.vocab.contains))
    assert sorted(searched) == sorted(reference)
    # every returned word passes every check, every other word fails one
    for w in POOL:
        assert state.allows(w) == (w in reference)


def test_solve_is_idempotent(solver):
    first = solver.solve(contains="a", invalid_positions="a1")
    second = solver.solve(contains="a", invalid_positions="a1")
    assert first == second
    assert first == ["zebra", "crane", "total", "stoal", "tally", "tangy", "mangy", "rangy", "tango"]


def test_backtracking_without_dictionary():
    state = ConstraintState.from_signals(correct_positions="a1p2p3l4", contains_only_once="e")
    assert list(enumerate_assignments(state)) == ["apple"]

    state = ConstraintState.from_signals(correct_positions="c1r2a3n4")
    words = list(enumerate_assignments(state))
    assert len(words) == 26
    assert words[0] == "crana" and words[-1] == "cranz"

    state = ConstraintState.from_signals(correct_positions="c1r2a3n4", contains_only_once="a")
    assert "crana" not in list(enumerate_assignments(state))


def test_backtracking_contradiction_yields_nothing():
    state = ConstraintState.from_signals(doesnt_contain="a", contains="a")
    assert list(enumerate_assignments(state)) == []


def test_solver_requires_vocab():
    with pytest.raises(TypeError):
        WordleSolver(POOL)
