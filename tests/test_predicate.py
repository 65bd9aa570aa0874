import math

import pandas as pd
import pytest

from csvshell.predicate import PredicateEvaluator, to_number, to_numbers

@pytest.fixture
def evaluator(ui):
    return PredicateEvaluator(ui)

@pytest.mark.parametrize("text, expected", [
    ("30", 30.0),
    ("-3.5", -3.5),
    ("+2", 2.0),
    (".5", 0.5),
    ("7.", 7.0),
    ("1e3", 1000.0),
    ("1e", 1.0),
    ("12abc", 12.0),
    ("abc", 0.0),
    ("", 0.0),
    ("nan", 0.0),
])
def test_to_number(text, expected):
    assert to_number(text) == expected

def test_to_number_infinity():
    assert math.isinf(to_number("inf"))
    assert to_number("-Infinity") < 0

def test_to_numbers_matches_scalar():
    values = ["10", "x", "2.5kg", "", "-1"]
    assert to_numbers(pd.Series(values, dtype=object)).tolist() == [to_number(v) for v in values]

def test_equality_is_textual(evaluator):
    assert evaluator.compare("5", "==", "5")
    assert not evaluator.compare("5", "==", "5.0")
    assert evaluator.compare("5", "!=", "5.0")
    assert not evaluator.compare("Bob", "!=", "Bob")
    assert not evaluator.compare("bob", "==", "Bob")

def test_ordering_is_numeric(evaluator):
    assert evaluator.compare("30", ">", "25")
    assert not evaluator.compare("22", ">", "25")
    assert evaluator.compare("9", "<", "10")
    assert not evaluator.compare("10", "<", "10")
    # text reads as zero
    assert evaluator.compare("abc", "<", "1")
    assert not evaluator.compare("abc", ">", "0")

def test_unknown_operator_is_false_and_reported(evaluator, capsys):
    assert evaluator.compare("1", ">=", "0") is False
    assert "unknown operator: >=" in capsys.readouterr().err

def test_mask(evaluator):
    values = pd.Series(["30", "22", "41"], dtype=object)
    assert evaluator.mask(values, ">", "25").tolist() == [True, False, True]
    assert evaluator.mask(values, "==", "22").tolist() == [False, True, False]

def test_mask_unknown_operator_reported_once(evaluator, capsys):
    values = pd.Series(["1", "2", "3"], dtype=object)
    assert evaluator.mask(values, "~", "2").tolist() == [False, False, False]
    assert capsys.readouterr().err.count("unknown operator: ~") == 1

def test_operators(evaluator):
    assert evaluator.operators == ["==", "!=", ">", "<"]

def test_only_ascii_digits_are_numbers():
    assert to_number("٣") == 0.0
    assert to_number("4٣") == 4.0
    assert to_numbers(pd.Series(["٣", "7"], dtype=object)).tolist() == [0.0, 7.0]

def test_mask_unknown_operator_on_empty_column_is_silent(evaluator, capsys):
    values = pd.Series([], dtype=object)
    assert evaluator.mask(values, "~", "2").tolist() == []
    assert capsys.readouterr().err == ""
