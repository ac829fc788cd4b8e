from __future__ import annotations

import pytest

from vim_replay.commands import (
    UNBOUNDED_COUNT,
    CommandParseError,
    CommandParser,
    Delete,
    MissingArgumentError,
    MoveLeft,
    MoveRight,
    MoveToNext,
    Replace,
    Undo,
    UnsupportedCommandError,
    format_commands,
    parse_commands,
    resolve_count,
)


def test_parser_defaults_count_to_one() -> None:
    commands = parse_commands("hlxu")

    assert commands == (MoveLeft(1), MoveRight(1), Delete(1), Undo(1))


def test_parser_applies_digit_prefix_to_next_letter_only() -> None:
    commands = parse_commands("12l3hx")

    assert commands == (MoveRight(12), MoveLeft(3), Delete(1))


def test_parser_consumes_replace_and_find_arguments() -> None:
    commands = parse_commands("3rXfz")

    assert commands == (Replace(char="X", count=3), MoveToNext("z"))


def test_parser_takes_argument_characters_verbatim() -> None:
    commands = parse_commands("r5ffrhfu")

    assert commands == (
        Replace(char="5"),
        MoveToNext("f"),
        Replace(char="h"),
        MoveToNext("u"),
    )


def test_find_discards_count() -> None:
    assert parse_commands("7fa") == (MoveToNext("a"),)


def test_parser_accepts_zero_count() -> None:
    assert parse_commands("0l") == (MoveRight(0),)


def test_parser_returns_empty_tuple_for_empty_string() -> None:
    assert parse_commands("") == ()


def test_trailing_digits_are_ignored() -> None:
    assert parse_commands("l42") == (MoveRight(1),)


def test_overflowing_count_becomes_unbounded() -> None:
    commands = parse_commands("99999999999x2147483648u2147483647l")

    assert commands == (
        Delete(UNBOUNDED_COUNT),
        Undo(UNBOUNDED_COUNT),
        MoveRight(UNBOUNDED_COUNT),
    )


def test_enormous_digit_run_does_not_raise() -> None:
    commands = parse_commands("9" * 5000 + "h")

    assert commands == (MoveLeft(UNBOUNDED_COUNT),)


def test_leading_zeros_do_not_trigger_overflow() -> None:
    commands = parse_commands("0" * 20 + "5l")

    assert commands == (MoveRight(5),)


def test_non_ascii_digits_count() -> None:
    # ARABIC-INDIC DIGIT THREE
    assert parse_commands("٣l") == (MoveRight(3),)


@pytest.mark.parametrize(
    "digits, expected",
    [
        ("", 1),
        ("1", 1),
        ("0", 0),
        ("2147483647", UNBOUNDED_COUNT),
        ("2147483646", 2147483646),
        ("4294967297", UNBOUNDED_COUNT),
    ],
)
def test_resolve_count(digits: str, expected: int) -> None:
    assert resolve_count(digits) == expected


def test_unsupported_command_reports_character_and_position() -> None:
    with pytest.raises(UnsupportedCommandError) as excinfo:
        parse_commands("5k")

    error = excinfo.value
    assert error.command == "k"
    assert error.position == 1
    assert str(error) == "Unsupported command: k"
    assert isinstance(error, CommandParseError)
    assert isinstance(error, ValueError)


def test_unsupported_command_after_valid_commands() -> None:
    with pytest.raises(UnsupportedCommandError) as excinfo:
        parse_commands("3lrx w")

    assert excinfo.value.command == " "
    assert excinfo.value.position == 4


@pytest.mark.parametrize("source", ["r", "3r", "lf", "hhf"])
def test_missing_argument(source: str) -> None:
    with pytest.raises(MissingArgumentError) as excinfo:
        parse_commands(source)

    assert excinfo.value.command == source[-1]
    assert excinfo.value.position == len(source) - 1


def test_parser_instance_is_reusable() -> None:
    parser = CommandParser(logger_name="tests.parser")

    assert parser.parse("l") == (MoveRight(1),)
    assert parser.parse("2h") == (MoveLeft(2),)


def test_format_commands_round_trips_tokens() -> None:
    source = "5l3rXfzx2u"

    assert format_commands(parse_commands(source)) == source


def test_command_values_validate_arguments() -> None:
    with pytest.raises(ValueError):
        MoveLeft(-1)
    with pytest.raises(ValueError):
        Replace(char="ab")
    with pytest.raises(ValueError):
        MoveToNext("")


def test_replace_fields_are_keyword_only() -> None:
    with pytest.raises(TypeError):
        Replace("X", 3)  # type: ignore[misc]

    assert Replace(count=3, char="X") == Replace(char="X", count=3)
