"""
Tests for RosterParser line rules.
"""
import logging

import pytest

from deanery import ControlType, RosterImportError, RosterParser


@pytest.fixture
def parser():
    return RosterParser()


def test_reference_import_scenario(parser):
    text = "[GROUPS]\nCS-101|Ivanov,Petrov\n[DISCIPLINES]\nMath|экзамен\nHistory|pass123"

    result = parser.parse(text)

    assert result.groups == [("CS-101", ["Ivanov", "Petrov"])]
    assert result.disciplines == [("Math", ControlType.EXAM)]


def test_both_control_literals(parser):
    result = parser.parse("[DISCIPLINES]\nMath|экзамен\nHistory|зачет\n")
    assert result.disciplines == [("Math", ControlType.EXAM), ("History", ControlType.PASS)]


def test_lines_are_trimmed_and_blank_lines_skipped(parser):
    text = "\n   [GROUPS]   \n\n   CS-101|Ivanov , Petrov  \n\n\n  [DISCIPLINES]\n  Math|экзамен  \n"
    result = parser.parse(text)
    assert result.groups == [("CS-101", ["Ivanov", "Petrov"])]
    assert result.disciplines == [("Math", ControlType.EXAM)]


def test_windows_line_endings(parser):
    result = parser.parse("[GROUPS]\r\nCS-101|Ivanov\r\n[DISCIPLINES]\r\nMath|зачет\r\n")
    assert result.groups == [("CS-101", ["Ivanov"])]
    assert result.disciplines == [("Math", ControlType.PASS)]


@pytest.mark.parametrize("line", ["CS-101", "CS-101|", "CS-101| ", "CS-101|,,"])
def test_group_without_students(parser, line):
    result = parser.parse(f"[GROUPS]\n{line}\n")
    assert result.groups == [("CS-101", [])]


@pytest.mark.parametrize("line", ["|Ivanov,Petrov", "  |Ivanov"])
def test_group_without_name_is_skipped(parser, line):
    assert parser.parse(f"[GROUPS]\n{line}\nCS-102|Sidorov").groups == [("CS-102", ["Sidorov"])]


def test_group_line_split_on_first_separator_only(parser):
    result = parser.parse("[GROUPS]\nCS-101|Ivanov|Jr,Petrov")
    assert result.groups == [("CS-101", ["Ivanov|Jr", "Petrov"])]


def test_empty_student_names_dropped(parser):
    result = parser.parse("[GROUPS]\nCS-101|Ivanov,, ,Petrov,")
    assert result.groups == [("CS-101", ["Ivanov", "Petrov"])]


@pytest.mark.parametrize("line", [
    "History|pass123",
    "History|",
    "History",
    "History|Зачет",
    "History| зачет",
    "History|экзамен|extra",
])
def test_invalid_control_token_skips_discipline(parser, line):
    result = parser.parse(f"[DISCIPLINES]\n{line}\nMath|экзамен")
    assert result.disciplines == [("Math", ControlType.EXAM)]


def test_discipline_without_name_is_skipped(parser):
    assert parser.parse("[DISCIPLINES]\n|экзамен").disciplines == []


def test_lines_before_any_section_ignored(parser):
    result = parser.parse("CS-100|Nobody\n[GROUPS]\nCS-101|Ivanov")
    assert result.groups == [("CS-101", ["Ivanov"])]


def test_sections_can_repeat(parser):
    text = "[GROUPS]\nA|\n[DISCIPLINES]\nMath|зачет\n[GROUPS]\nB|x"
    result = parser.parse(text)
    assert [name for name, _ in result.groups] == ["A", "B"]
    assert len(result.disciplines) == 1


def test_duplicates_skipped_first_wins(parser, caplog):
    text = (
        "[GROUPS]\n"
        "CS-101|Ivanov,ivanov,Petrov\n"
        "cs-101|Sidorov\n"
        "[DISCIPLINES]\n"
        "Math|экзамен\n"
        "MATH|зачет\n"
    )
    with caplog.at_level(logging.WARNING, logger="deanery.data.parser"):
        result = parser.parse(text)

    assert result.groups == [("CS-101", ["Ivanov", "Petrov"])]
    assert result.disciplines == [("Math", ControlType.EXAM)]
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 3


def test_same_student_in_different_groups_kept(parser):
    result = parser.parse("[GROUPS]\nA|Ivanov\nB|Ivanov")
    assert result.groups == [("A", ["Ivanov"]), ("B", ["Ivanov"])]


def test_empty_text_gives_empty_roster(parser):
    result = parser.parse("")
    assert result.groups == [] and result.disciplines == []
    assert result.student_count == 0


def test_student_count(parser):
    assert parser.parse("[GROUPS]\nA|x,y\nB|z").student_count == 3


@pytest.mark.parametrize("value", [None, b"[GROUPS]", 42])
def test_non_text_input_is_import_error(parser, value):
    with pytest.raises(RosterImportError):
        parser.parse(value)
