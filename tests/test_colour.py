import pytest
from commit_notifier.core.exceptions import ConfigurationError
from commit_notifier.models.commit import FileChanges
from commit_notifier.services.colour import GREEN, RED, WHITE, change_colour, resolve_colour


@pytest.mark.parametrize("value", ["", None, "   "])
def test_resolve_colour_defaults_to_white(value):
    assert resolve_colour(value) == WHITE == 16777215


@pytest.mark.parametrize("hex_colour", ["FF0000", "00ff00", "123abc", "000000", "7"])
def test_resolve_colour_hash_is_optional(hex_colour):
    assert resolve_colour(hex_colour) == resolve_colour("#" + hex_colour)
    assert resolve_colour(hex_colour) == int(hex_colour, 16)


@pytest.mark.parametrize("bad", ["#zzzzzz", "red", "#", "#12 34", "#1000000", "#f_f", "0xff", "#+ff", "-1"])
def test_resolve_colour_malformed_raises(bad):
    with pytest.raises(ConfigurationError):
        resolve_colour(bad)


def test_change_colour_added_wins_tie_break():
    changes = FileChanges(added=["a.txt"], removed=["b.txt"])
    assert change_colour(WHITE, changes) == GREEN


def test_change_colour_removed_only_is_red():
    assert change_colour(WHITE, FileChanges(removed=["b.txt"])) == RED


def test_change_colour_keeps_base_without_adds_or_removes():
    assert change_colour(0x123456, FileChanges(modified=["c.txt"])) == 0x123456
    assert change_colour(0x123456, None) == 0x123456
