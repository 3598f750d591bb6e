import pytest

from pmud.text import replace_all


def test_replaces_every_occurrence():
    assert replace_all("a-b-c", "-", "+") == "a+b+c"


def test_replacement_containing_pattern_is_not_rescanned():
    assert replace_all("aa", "a", "aa") == "aaaa"


def test_multi_character_pattern():
    assert replace_all("one::two::three", "::", ":") == "one:two:three"


@pytest.mark.parametrize("text", ["", "hello", "no dashes here"])
def test_absent_pattern_leaves_text_unchanged(text):
    assert replace_all(text, "-", "+") == text


@pytest.mark.parametrize("text", ["x", "axbxc", "xxx", "plain"])
def test_round_trip_through_marker(text):
    marked = replace_all(text, "x", "\0")
    assert "x" not in marked
    assert replace_all(marked, "\0", "x") == text


def test_removal_with_empty_replacement():
    result = replace_all("a_b_c", "_", "")
    assert "_" not in result
    assert len(result) == 3


def test_empty_pattern_rejected():
    with pytest.raises(ValueError):
        replace_all("abc", "", "x")