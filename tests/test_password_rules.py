from concurrent.futures import ThreadPoolExecutor

import pytest

from validation.password_rules import (
    DIGIT_MESSAGE,
    MIN_LENGTH_MESSAGE,
    SPECIAL_CHARACTER_MESSAGE,
    UPPERCASE_MESSAGE,
    ValidationResult,
    evaluate,
)

ALL_MESSAGES = [
    MIN_LENGTH_MESSAGE,
    UPPERCASE_MESSAGE,
    DIGIT_MESSAGE,
    SPECIAL_CHARACTER_MESSAGE,
]


def test_valid_password():
    result = evaluate("MinhaSenh@123")
    assert result.valid is True
    assert result.errors == []


def test_empty_password_fails_every_rule_in_order():
    result = evaluate("")
    assert result.valid is False
    assert result.errors == ALL_MESSAGES


def test_only_length_fails():
    assert evaluate("Ab1!xyz") == ValidationResult(
        valid=False, errors=[MIN_LENGTH_MESSAGE]
    )


def test_exactly_eight_characters_is_long_enough():
    result = evaluate("Ab1!wxyz")
    assert result.valid is True


@pytest.mark.parametrize("password", ["a", "Ab1!", "1234567", "ÁÉÍÓÚÇÃ"])
def test_short_passwords_report_length(password):
    assert MIN_LENGTH_MESSAGE in evaluate(password).errors


def test_length_counts_characters_not_bytes():
    # 8 characters, 16 bytes in UTF-8
    assert MIN_LENGTH_MESSAGE not in evaluate("çççççççç").errors
    # 7 characters, more than 8 bytes
    assert MIN_LENGTH_MESSAGE in evaluate("ççççççç").errors


@pytest.mark.parametrize(
    "password", ["minhasenh@123", "ÁÉÍÓÚ@123abc", "12345678!"]
)
def test_missing_ascii_uppercase(password):
    assert UPPERCASE_MESSAGE in evaluate(password).errors


@pytest.mark.parametrize(
    "password", ["MinhaSenh@abc", "MinhaSenh@١٢٣", "Senha@²³¹xyz"]
)
def test_missing_ascii_digit(password):
    assert DIGIT_MESSAGE in evaluate(password).errors


@pytest.mark.parametrize(
    "password", ["MinhaSenha123", "MinhaSenha123?", "Senha-123_()+="]
)
def test_missing_special_character(password):
    assert SPECIAL_CHARACTER_MESSAGE in evaluate(password).errors


@pytest.mark.parametrize("special", list("!@#$%^&*"))
def test_each_special_character_is_accepted(special):
    assert evaluate(f"MinhaSenha1{special}").valid is True


def test_several_failures_keep_rule_order():
    result = evaluate("senha")
    assert result.errors == ALL_MESSAGES

    result = evaluate("senhalonga")
    assert result.errors == [
        UPPERCASE_MESSAGE,
        DIGIT_MESSAGE,
        SPECIAL_CHARACTER_MESSAGE,
    ]

    result = evaluate("SENHA!")
    assert result.errors == [MIN_LENGTH_MESSAGE, DIGIT_MESSAGE]


def test_evaluate_is_deterministic():
    first = evaluate("abc")
    second = evaluate("abc")
    assert first == second
    assert first is not second


def test_results_do_not_share_error_lists():
    first = evaluate("abc")
    first.errors.append("extra")
    assert evaluate("abc").errors == ALL_MESSAGES


def test_concurrent_evaluation_does_not_interfere():
    passwords = ["MinhaSenh@123", "", "Ab1!xyz", "senhalonga"] * 50
    expected = [evaluate(password) for password in passwords]

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(evaluate, passwords))

    assert results == expected


@pytest.mark.parametrize(
    "password", ["Abc1!\nxyz", "Abcd\r1!xy", "Abc1!\u2028xyzw", "Abc1\u2029!xyz"]
)
def test_line_terminators_break_the_length_run(password):
    assert evaluate(password).errors == [MIN_LENGTH_MESSAGE]


def test_long_enough_run_around_a_line_break():
    assert evaluate("Abc1!xyz\nq").valid is True
    assert evaluate("\nAbc1!xyz").valid is True


def test_tab_counts_towards_length():
    assert evaluate("Abc1!\txy").valid is True
