import itertools

import pytest
from mastermind.engine import (
    Feedback, InvalidGuess, blacks_count, evaluate, filter_candidates,
    generate_all_candidates, generate_outcome_space, opening_guess, parse_code,
    validate_code, whites_count,
)

# --- 4-hole golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,target,expected", [
    ((0, 0, 1, 1), (0, 1, 2, 3), (1, 1)),
    ((1, 2, 3, 4), (1, 2, 3, 4), (4, 0)),
    ((1, 2, 3, 4), (4, 3, 2, 1), (0, 4)),
    ((1, 1, 2, 2), (2, 2, 1, 1), (0, 4)),
    ((1, 1, 1, 1), (1, 2, 3, 4), (1, 0)),
    ((2, 2, 5, 5), (2, 5, 2, 5), (2, 2)),
    ((0, 0, 0, 1), (1, 0, 0, 0), (2, 2)),
    ((5, 5, 5, 5), (0, 1, 2, 3), (0, 0)),
])
def test_evaluate_golden(guess, target, expected):
    fb = evaluate(guess, target)
    assert fb == expected
    assert (blacks_count(guess, target), whites_count(guess, target)) == expected


def test_feedback_fields_and_text():
    fb = evaluate((0, 0, 1, 1), (0, 1, 2, 3))
    assert fb.blacks == 1 and fb.whites == 1
    assert isinstance(fb, Feedback)
    assert str(fb) == "1B1W"


def test_evaluate_length_mismatch():
    with pytest.raises(ValueError):
        evaluate((0, 1), (0, 1, 2))


def test_evaluate_properties_exhaustive_3x3():
    codes = generate_all_candidates(3, 3)
    for g, t in itertools.product(codes, repeat=2):
        fb = evaluate(g, t)
        assert fb.blacks + fb.whites <= 3
        assert fb == evaluate(t, g)
    for g in codes:
        assert evaluate(g, g) == (3, 0)


# --- candidate space ---
@pytest.mark.parametrize("holes,colors", [(1, 1), (1, 6), (2, 2), (3, 4), (4, 6)])
def test_generate_all_candidates_count_and_order(holes, colors):
    cands = generate_all_candidates(holes, colors)
    assert len(cands) == colors ** holes
    assert len(set(cands)) == len(cands)
    assert cands == sorted(cands)
    assert cands[0] == (0,) * holes
    assert cands[-1] == (colors - 1,) * holes


def test_generate_all_candidates_2x2():
    assert generate_all_candidates(2, 2) == [(0, 0), (0, 1), (1, 0), (1, 1)]


@pytest.mark.parametrize("holes,colors", [(0, 6), (4, 0), (-1, 2)])
def test_generate_all_candidates_rejects_bad_dimensions(holes, colors):
    with pytest.raises(ValueError):
        generate_all_candidates(holes, colors)


@pytest.mark.parametrize("holes", [1, 2, 3, 4, 5])
def test_outcome_space_shape(holes):
    outcomes = set(generate_outcome_space(holes))
    expected = {(b, w) for b in range(holes + 1) for w in range(holes + 1) if b + w <= holes}
    expected.discard((holes - 1, 1))
    assert outcomes == expected


def test_outcome_space_4_holes():
    outcomes = generate_outcome_space(4)
    assert len(outcomes) == 14
    assert (3, 1) not in outcomes
    assert (4, 0) in outcomes and (0, 4) in outcomes


@pytest.mark.parametrize("holes,colors", [(2, 3), (3, 4)])
def test_outcome_space_matches_reachable_feedback(holes, colors):
    codes = generate_all_candidates(holes, colors)
    reachable = {evaluate(g, t) for g in codes for t in codes}
    assert reachable == set(generate_outcome_space(holes))


@pytest.mark.parametrize("holes,colors,expected", [
    (4, 6, (0, 0, 1, 1)),
    (5, 8, (0, 0, 1, 1, 1)),
    (2, 2, (0, 0)),
    (1, 6, (0,)),
    (4, 1, (0, 0, 0, 0)),
])
def test_opening_guess(holes, colors, expected):
    assert opening_guess(holes, colors) == expected


# --- constraint filter ---
def test_filter_candidates_keeps_truth_and_order():
    cands = generate_all_candidates(4, 6)
    truth = (0, 1, 2, 3)
    guess = (0, 0, 1, 1)
    out = filter_candidates(cands, guess, evaluate(guess, truth))
    assert truth in out
    assert out == sorted(out)
    assert len(out) < len(cands)
    assert all(evaluate(guess, c) == (1, 1) for c in out)


def test_filter_candidates_truth_preserved_exhaustive_2x3():
    cands = generate_all_candidates(2, 3)
    for guess, truth in itertools.product(cands, repeat=2):
        assert truth in filter_candidates(cands, guess, evaluate(guess, truth))


def test_filter_candidates_accepts_plain_tuple_feedback():
    cands = generate_all_candidates(2, 2)
    assert filter_candidates(cands, (0, 0), (1, 0)) == [(0, 1), (1, 0)]


# --- validation ---
def test_validate_code():
    assert validate_code((0, 1, 2, 5), 4, 6) is None
    assert isinstance(validate_code((0, 1, 2), 4, 6), InvalidGuess)
    assert isinstance(validate_code((0, 1, 2, 6), 4, 6), InvalidGuess)
    assert isinstance(validate_code((0, -1, 2, 3), 4, 6), InvalidGuess)
    assert isinstance(validate_code(("0", 1, 2, 3), 4, 6), InvalidGuess)
    assert isinstance(validate_code((True, 1, 2, 3), 4, 6), InvalidGuess)


def test_invalid_guess_is_value_error_with_code():
    err = validate_code((9, 9), 2, 6)
    assert isinstance(err, ValueError)
    assert err.code == (9, 9)
    assert "out of range" in str(err)


@pytest.mark.parametrize("text,expected", [
    ("0123", (0, 1, 2, 3)),
    ("0 1 2 3", (0, 1, 2, 3)),
    ("0,1,2,3\n", (0, 1, 2, 3)),
    ("  5 5 0 0 ", (5, 5, 0, 0)),
])
def test_parse_code(text, expected):
    assert parse_code(text, 4, 6) == expected


@pytest.mark.parametrize("text", ["01a3", "012", "0126", "", "0 1 2 3 4"])
def test_parse_code_rejects(text):
    with pytest.raises(InvalidGuess):
        parse_code(text, 4, 6)
