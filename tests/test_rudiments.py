import pytest

import stickwork.fitting
import stickwork.pattern
import stickwork.rudiments


def test_catalog_paradiddle () -> None:

	assert stickwork.rudiments.CATALOG["paradiddle"].canonical_sticking == ("R", "L", "R", "R", "L", "R", "L", "L")


def test_catalog_is_read_only () -> None:

	with pytest.raises(TypeError):
		stickwork.rudiments.CATALOG["paradiddle"] = None  # type: ignore[index]


def test_every_rule_points_at_the_catalog () -> None:

	for _, key in stickwork.rudiments.RULES:
		assert key in stickwork.rudiments.CATALOG


@pytest.mark.parametrize("key", sorted(stickwork.rudiments.CATALOG))
def test_canonical_sticking_expands_to_itself (key: str) -> None:

	"""Expanding a rudiment to its own length reproduces it exactly."""

	definition = stickwork.rudiments.CATALOG[key]
	sticking = list(definition.canonical_sticking)

	assert definition.expand(len(sticking)) == sticking
	assert stickwork.fitting.expand(sticking, len(sticking)) == sticking


def test_paradiddle_fills_sixteen_notes () -> None:

	sticking = stickwork.rudiments.rudiment_sticking("paradiddle", 16)

	assert sticking == ["R", "L", "R", "R", "L", "R", "L", "L"] * 2


def test_rudiment_sticking_unknown_key () -> None:

	with pytest.raises(KeyError):
		stickwork.rudiments.rudiment_sticking("mill-stroke", 16)


# --- rule-by-rule matching ---


@pytest.mark.parametrize("text,expected", [
	("Triple Paradiddle", "triple-paradiddle"),
	("double paradiddle in 12/8", "double-paradiddle"),
	("Paradiddle-diddle", "paradiddle-diddle"),
	("paradiddle diddle around the toms", "paradiddle-diddle"),
	("Flam Paradiddle", "flam-paradiddle"),
	("Inverted Paradiddle", "inverted-paradiddle"),
	("Single Paradiddle", "paradiddle"),
	("paradiddle", "paradiddle"),
	("Triple Ratamacue", "triple-ratamacue"),
	("Double Ratamacue", "double-ratamacue"),
	("Single Ratamacue", "single-ratamacue"),
	("Flam Tap", "flam-tap"),
	("flamacue", "flam-tap"),
	("Flam Accent", "flam-accent"),
	("Single Drag Tap", "single-drag-tap"),
	("Double Drag Tap", "double-drag-tap"),
	("Swiss Army Triplet", "swiss-army-triplet"),
	("Seventeen Stroke Roll", "seventeen-stroke-roll"),
	("17-stroke roll", "seventeen-stroke-roll"),
	("Fifteen Stroke Roll", "fifteen-stroke-roll"),
	("15-stroke roll", "fifteen-stroke-roll"),
	("Thirteen Stroke Roll", "thirteen-stroke-roll"),
	("Eleven Stroke Roll", "eleven-stroke-roll"),
	("Ten Stroke Roll", "ten-stroke-roll"),
	("Nine Stroke Roll", "nine-stroke-roll"),
	("Seven Stroke Roll", "seven-stroke-roll"),
	("7-stroke roll", "seven-stroke-roll"),
	("Six Stroke Roll", "six-stroke-roll"),
	("Five Stroke Roll", "five-stroke-roll"),
	("5-stroke", "five-stroke-roll"),
	("Single Stroke Four", "single-stroke-four"),
	("Single Stroke Five", "single-stroke-five"),
	("Single Stroke Seven", "single-stroke-seven"),
	("Single Stroke Nine", "single-stroke-nine"),
	("Single Stroke Thirteen", "single-stroke-thirteen"),
	("Single Stroke Fifteen", "single-stroke-fifteen"),
	("Double Stroke Roll", "double-stroke-roll"),
	("Single Stroke Roll", "single-stroke-roll"),
	("single stroke warm-up", "single-stroke-roll"),
])
def test_match_rule (text: str, expected: str) -> None:

	assert stickwork.rudiments.match_rudiment(text) == expected


@pytest.mark.parametrize("text", ["Basic rock groove", "Funk ghost notes", "", "Disco hi-hat"])
def test_no_match (text: str) -> None:

	assert stickwork.rudiments.match_rudiment(text) is None


def test_specific_names_win_over_generalizations () -> None:

	"""Every text matching a specific rule would also contain a later, more general needle."""

	assert stickwork.rudiments.match_rudiment("triple paradiddle") != "paradiddle"
	assert stickwork.rudiments.match_rudiment("17-stroke roll") != "seven-stroke-roll"
	assert stickwork.rudiments.match_rudiment("15-stroke roll") != "five-stroke-roll"
	assert stickwork.rudiments.match_rudiment("single stroke four") != "single-stroke-roll"
	assert stickwork.rudiments.match_rudiment("single stroke seven") != "single-stroke-roll"
	assert stickwork.rudiments.match_rudiment("single stroke fifteen") != "single-stroke-five"


def test_first_match_wins_across_rules () -> None:

	"""Text naming two rudiments resolves to the one listed first."""

	assert stickwork.rudiments.match_rudiment("Double Paradiddle into Single Stroke Roll") == "double-paradiddle"


def test_match_is_case_insensitive_and_deterministic () -> None:

	text = "TRIPLE RATAMACUE study"
	first = stickwork.rudiments.match_rudiment(text)

	assert first == "triple-ratamacue"
	assert all(stickwork.rudiments.match_rudiment(text) == first for _ in range(10))


def test_match_metadata_reads_tags () -> None:

	metadata = stickwork.pattern.PresetMetadata(name="Warm-up 3", description="Hands only", tags=["Swiss Army Triplet"])

	assert stickwork.rudiments.match_metadata(metadata) == "swiss-army-triplet"


def test_is_rudiment_text () -> None:

	assert stickwork.rudiments.is_rudiment_text("Pataflafla study")
	assert not stickwork.rudiments.is_rudiment_text("Rock groove")


@pytest.mark.parametrize("key,strokes", [
	("single-stroke-five", 5),
	("single-stroke-seven", 7),
	("single-stroke-nine", 9),
	("single-stroke-thirteen", 13),
	("single-stroke-fifteen", 15),
])
def test_single_stroke_groups_per_hand (key: str, strokes: int) -> None:

	"""Each hand plays the full group before the other takes over."""

	assert stickwork.rudiments.CATALOG[key].canonical_sticking == ("R",) * strokes + ("L",) * strokes


def test_single_stroke_seven_fills_fourteen_notes () -> None:

	key = stickwork.rudiments.match_rudiment("Single Stroke Seven")

	assert stickwork.rudiments.rudiment_sticking(key, 14) == ["R"] * 7 + ["L"] * 7
