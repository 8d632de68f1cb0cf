import pytest

import stickwork.exceptions
import stickwork.tokens


def test_parse_splits_on_whitespace_runs () -> None:

	"""Runs of spaces, tabs and newlines all separate tokens."""

	assert stickwork.tokens.parse("  S  S K+S\tS \n") == ["S", "S", "K+S", "S"]


def test_parse_empty_text () -> None:

	assert stickwork.tokens.parse("") == []
	assert stickwork.tokens.parse("   ") == []
	assert stickwork.tokens.parse(None) == []


def test_parse_copies_split_lists () -> None:

	"""An already-split list comes back as a new list."""

	tokens = ["R", "L"]
	parsed = stickwork.tokens.parse(tokens)

	assert parsed == tokens
	assert parsed is not tokens


def test_format_joins_with_single_spaces () -> None:

	assert stickwork.tokens.format(["R", "L", "R", "R"]) == "R L R R"
	assert stickwork.tokens.format([4, 4, 4, 4]) == "4 4 4 4"


def test_parse_format_round_trip () -> None:

	"""parse(format(s)) == s for whitespace-free tokens."""

	sequence = ["lR", "rL", "R", "L", "llR", "K+S"]

	assert stickwork.tokens.parse(stickwork.tokens.format(sequence)) == sequence


def test_format_parse_normalizes_whitespace () -> None:

	assert stickwork.tokens.format(stickwork.tokens.parse(" R   L\tR ")) == "R L R"


def test_parse_numbers () -> None:

	assert stickwork.tokens.parse_numbers("4 4 2 2 4") == [4, 4, 2, 2, 4]
	assert stickwork.tokens.parse_numbers("") == []
	assert stickwork.tokens.parse_numbers([3, 3, 2]) == [3, 3, 2]


@pytest.mark.parametrize("text", ["4 x 4", "4 0 4", "4 -4", "2.5 2"])
def test_parse_numbers_rejects_bad_tokens (text: str) -> None:

	"""Phrase tokens have to be positive integers."""

	with pytest.raises(stickwork.exceptions.FormatError):
		stickwork.tokens.parse_numbers(text)


def test_parse_numbers_rejects_bad_list_entries () -> None:

	with pytest.raises(stickwork.exceptions.FormatError):
		stickwork.tokens.parse_numbers([4, "4"])


@pytest.mark.parametrize("value", [16, 2.5, {"S": 1}])
def test_parse_rejects_non_text (value) -> None:

	"""A stored line that is neither text nor a list is a format error."""

	with pytest.raises(stickwork.exceptions.FormatError):
		stickwork.tokens.parse(value)

	with pytest.raises(stickwork.exceptions.FormatError):
		stickwork.tokens.parse_numbers(value)
