"""Canonical rudiment stickings and the text matcher that recognises them.

The catalog maps each rudiment key to its base cycle. Flams, drags and ruffs
keep their grace notes inside a single token (``lR`` is a left-hand flam into
a right-hand stroke, ``llR`` a drag) so every token is one subdivision slot.

Matching runs over free text (preset name, description and tags) using the
ordered table :data:`RULES`. The first rule with a needle present in the text
wins. Order matters: ``"triple paradiddle"`` has to be tested before
``"paradiddle"`` or every triple paradiddle would be filed as a plain one.
"""

import dataclasses
import types
import typing

import stickwork.fitting
import stickwork.tokens

if typing.TYPE_CHECKING:
	import stickwork.pattern


@dataclasses.dataclass(frozen=True)
class RudimentDefinition:

	"""
	A named rudiment and the sticking base cycle that defines it.
	"""

	key: str
	canonical_sticking: typing.Tuple[str, ...]

	def expand (self, notes_per_bar: int) -> typing.List[str]:

		"""Stretch the canonical sticking to fill a bar."""

		return stickwork.fitting.expand(self.canonical_sticking, notes_per_bar)


def _define (key: str, sticking: str) -> RudimentDefinition:
	return RudimentDefinition(key=key, canonical_sticking=tuple(stickwork.tokens.parse(sticking)))


_DEFINITIONS = [
	_define("single-stroke-roll", "R L"),
	_define("double-stroke-roll", "R R L L"),
	_define("single-stroke-four", "R R R R L L L L"),
	_define("single-stroke-five", " ".join(["R"] * 5 + ["L"] * 5)),
	_define("single-stroke-seven", " ".join(["R"] * 7 + ["L"] * 7)),
	_define("single-stroke-nine", " ".join(["R"] * 9 + ["L"] * 9)),
	_define("single-stroke-thirteen", " ".join(["R"] * 13 + ["L"] * 13)),
	_define("single-stroke-fifteen", " ".join(["R"] * 15 + ["L"] * 15)),
	_define("paradiddle", "R L R R L R L L"),
	_define("inverted-paradiddle", "R L L R L R R L"),
	_define("double-paradiddle", "R L R L R R L R L R L L"),
	_define("triple-paradiddle", "R L R L R L R R L R L R L R L L"),
	_define("paradiddle-diddle", "R L R R L L"),
	_define("five-stroke-roll", "R R L L R"),
	_define("six-stroke-roll", "R R L L R L"),
	_define("seven-stroke-roll", "R R L L R R L"),
	_define("nine-stroke-roll", "R R L L R R L L R"),
	_define("ten-stroke-roll", "R R L L R R L L R L"),
	_define("eleven-stroke-roll", "R R L L R R L L R R L"),
	_define("thirteen-stroke-roll", "R R L L R R L L R R L L R"),
	_define("fifteen-stroke-roll", "R R L L R R L L R R L L R R L"),
	_define("seventeen-stroke-roll", "R R L L R R L L R R L L R R L L R"),
	_define("flam-tap", "lR rL R L"),
	_define("flam-accent", "lR rL R L"),
	_define("flam-paradiddle", "lR rL R R L R L L"),
	_define("single-drag-tap", "llR L"),
	_define("double-drag-tap", "llR llL"),
	_define("single-ratamacue", "llR L R"),
	_define("double-ratamacue", "llR llL R L"),
	_define("triple-ratamacue", "lllR lllL R L"),
	_define("swiss-army-triplet", "R L R"),
]

CATALOG: typing.Mapping[str, RudimentDefinition] = types.MappingProxyType({d.key: d for d in _DEFINITIONS})


# (needles, key) - a rule fires when any needle is a substring of the text.
RULES: typing.Tuple[typing.Tuple[typing.Tuple[str, ...], str], ...] = (
	(("triple paradiddle", "triple-paradiddle"), "triple-paradiddle"),
	(("double paradiddle", "double-paradiddle"), "double-paradiddle"),
	(("paradiddle diddle", "paradiddle-diddle"), "paradiddle-diddle"),
	(("flam paradiddle", "flam-paradiddle"), "flam-paradiddle"),
	(("inverted paradiddle", "inverted-paradiddle"), "inverted-paradiddle"),
	(("paradiddle",), "paradiddle"),

	(("triple ratamacue", "triple-ratamacue"), "triple-ratamacue"),
	(("double ratamacue", "double-ratamacue"), "double-ratamacue"),
	(("single ratamacue", "single-ratamacue"), "single-ratamacue"),

	(("flam tap", "flam-tap", "flam drag", "flamacue"), "flam-tap"),
	(("flam accent", "flam-accent"), "flam-accent"),

	(("single drag tap", "single-drag-tap"), "single-drag-tap"),
	(("double drag tap", "double-drag-tap"), "double-drag-tap"),

	(("swiss army triplet", "swiss-army-triplet"), "swiss-army-triplet"),

	(("seventeen stroke roll", "17-stroke"), "seventeen-stroke-roll"),
	(("fifteen stroke roll", "15-stroke"), "fifteen-stroke-roll"),
	(("thirteen stroke roll", "13-stroke"), "thirteen-stroke-roll"),
	(("eleven stroke roll", "11-stroke"), "eleven-stroke-roll"),
	(("ten stroke roll", "10-stroke"), "ten-stroke-roll"),
	(("nine stroke roll", "9-stroke"), "nine-stroke-roll"),
	(("seven stroke roll", "7-stroke"), "seven-stroke-roll"),
	(("six stroke roll", "6-stroke"), "six-stroke-roll"),
	(("five stroke roll", "5-stroke"), "five-stroke-roll"),

	(("single stroke four", "single-stroke-four"), "single-stroke-four"),
	(("single stroke five", "single-stroke-five"), "single-stroke-five"),
	(("single stroke seven", "single-stroke-seven"), "single-stroke-seven"),
	(("single stroke nine", "single-stroke-nine"), "single-stroke-nine"),
	(("single stroke thirteen", "single-stroke-thirteen"), "single-stroke-thirteen"),
	(("single stroke fifteen", "single-stroke-fifteen"), "single-stroke-fifteen"),
	(("double stroke roll", "double-stroke-roll"), "double-stroke-roll"),
	(("single stroke", "single-stroke-roll"), "single-stroke-roll"),
)

RUDIMENT_KEYWORDS = (
	"paradiddle", "roll", "drag", "flam", "ruff", "rudiment",
	"swiss army", "pataflafla", "ratamacue", "mill",
)


def match_rudiment (text: str) -> typing.Optional[str]:

	"""
	Return the key of the first rule that matches ``text``, or None.

	The text is case-folded here so callers can pass raw metadata.

	Example:
		```python
		match_rudiment("Triple Paradiddle warm-up")   # "triple-paradiddle"
		match_rudiment("Basic rock groove")            # None
		```
	"""

	folded = text.casefold()

	for needles, key in RULES:
		if any(needle in folded for needle in needles):
			return key

	return None


def match_metadata (metadata: "stickwork.pattern.PresetMetadata") -> typing.Optional[str]:

	"""Match against a preset's name, description and tags."""

	return match_rudiment(metadata.text())


def is_rudiment_text (text: str) -> bool:

	"""Loose check for rudiment vocabulary, used for reporting only."""

	folded = text.casefold()
	return any(keyword in folded for keyword in RUDIMENT_KEYWORDS)


def rudiment_sticking (key: str, notes_per_bar: int) -> typing.List[str]:

	"""Return the catalog sticking for ``key`` expanded to ``notes_per_bar``."""

	if key not in CATALOG:
		raise KeyError(f"Unknown rudiment {key!r}")

	return CATALOG[key].expand(notes_per_bar)
