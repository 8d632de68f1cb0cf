"""Accent placement.

Each strategy is a pure function of the bar's note count and returns a sorted
list of unique indices in ``[0, notes_per_bar)``. Strategies that talk about
beats assume a quarter-note pulse, i.e. four beats to the bar.

:func:`fill_accents` picks a strategy for a preset from its metadata text, but
only when the preset has no accents of its own. A non-empty explicit accent
set is never overwritten.
"""

import dataclasses
import logging
import math
import random
import typing

import stickwork.time_signature


logger = logging.getLogger(__name__)

AccentStrategy = typing.Callable[[int, int], typing.List[int]]


def clean_accents (indices: typing.Iterable[int], notes_per_bar: int) -> typing.List[int]:

	"""Drop out-of-range indices and duplicates, then sort."""

	return sorted({int(i) for i in indices if 0 <= i < notes_per_bar})


def latin_clave (notes_per_bar: int) -> typing.List[int]:

	"""
	Clave-style accents on beat 1, the "and" of beat 3 and the last note of the bar.

	Example:
		```python
		latin_clave(16)   # [0, 10, 15]
		```
	"""

	per_beat = notes_per_bar / 4

	return clean_accents([
		math.floor(0 * per_beat),
		math.floor(2.5 * per_beat),
		math.floor(4 * per_beat) - 1,
	], notes_per_bar)


def funk_syncopation (notes_per_bar: int) -> typing.List[int]:

	"""Off-beat accents halfway through beats 2, 3, 4 and (out of range, dropped) 5."""

	per_beat = notes_per_bar / 4

	return clean_accents([math.floor(offset * per_beat) for offset in (1.5, 2.5, 3.5, 4.5)], notes_per_bar)


def fill_build_up (notes_per_bar: int) -> typing.List[int]:

	"""
	Accents bunched toward the end of the bar, building into a fill.

	Example:
		```python
		fill_build_up(16)   # [8, 10, 13]
		```
	"""

	count = min(4, notes_per_bar // 4)

	return clean_accents([
		math.floor(notes_per_bar * (3 + i) / (count + 2)) for i in range(count)
	], notes_per_bar)


def backbeat (notes_per_bar: int) -> typing.List[int]:

	"""Accents on beats 2 and 4."""

	per_beat = notes_per_bar / 4
	return clean_accents([math.floor(per_beat * 1), math.floor(per_beat * 3)], notes_per_bar)


def downbeats (notes_per_bar: int, beats: int = 4) -> typing.List[int]:

	"""Accent the first note of every beat."""

	if beats <= 0:
		raise ValueError("Beats must be positive")

	per_beat = notes_per_bar / beats
	return clean_accents([math.floor(beat * per_beat) for beat in range(beats)], notes_per_bar)


def every_other (notes_per_bar: int) -> typing.List[int]:

	"""Accent every second note, starting on the downbeat."""

	return list(range(0, notes_per_bar, 2))


def cycle_starts (notes_per_bar: int, cycle_length: int) -> typing.List[int]:

	"""Accent the first note of each repetition of a base cycle."""

	if cycle_length <= 0:
		raise ValueError("Cycle length must be positive")

	return list(range(0, notes_per_bar, cycle_length))


def accents_from_phrase (phrase: typing.Sequence[int]) -> typing.List[int]:

	"""
	Accent the first note of each phrase group.

	Example:
		```python
		accents_from_phrase([3, 1, 4])   # [0, 3, 4]
		```
	"""

	accents: typing.List[int] = []
	position = 0

	for group in phrase:
		accents.append(position)
		position += group

	return accents


def phrase_from_accents (accents: typing.Iterable[int], notes_per_bar: int) -> typing.List[int]:

	"""
	Derive phrase groups from the gaps between accents.

	A bar without accents is a single group. When the first accent is not on
	the downbeat the lead-in becomes its own group.

	Example:
		```python
		phrase_from_accents([0, 2, 4, 6], 8)   # [2, 2, 2, 2]
		phrase_from_accents([4], 8)            # [4, 4]
		phrase_from_accents([], 4)             # [4]
		```
	"""

	valid = clean_accents(accents, notes_per_bar)

	if not valid:
		return [notes_per_bar]

	phrase: typing.List[int] = []

	if valid[0] > 0:
		phrase.append(valid[0])

	for current, following in zip(valid, valid[1:] + [notes_per_bar]):
		phrase.append(following - current)

	return phrase


def random_accents (notes_per_bar: int, rng: random.Random) -> typing.List[int]:

	"""Pick between zero and ``notes_per_bar`` distinct accent positions."""

	count = rng.randint(0, notes_per_bar)
	return sorted(rng.sample(range(notes_per_bar), count))


@dataclasses.dataclass(frozen=True)
class StyleRule:

	"""
	When a preset's text mentions a style, which strategy accents it.

	Attributes:
		name: Label used in logs.
		needles: The rule applies when any of these appears in the text.
		excluded: ...unless one of these appears as well.
		strategy: ``strategy(notes_per_bar, beats)`` producing the accents.
		common_time_only: Only applies to 4/4 bars.
	"""

	name: str
	needles: typing.Tuple[str, ...]
	strategy: AccentStrategy
	excluded: typing.Tuple[str, ...] = ()
	common_time_only: bool = False

	def applies_to (self, text: str, time_signature: stickwork.time_signature.TimeSignature) -> bool:

		if self.common_time_only and (time_signature.numerator, time_signature.denominator) != (4, 4):
			return False

		if not any(needle in text for needle in self.needles):
			return False

		return not any(word in text for word in self.excluded)


STYLE_RULES: typing.Tuple[StyleRule, ...] = (
	StyleRule("latin", ("latin",), lambda n, beats: latin_clave(n)),
	StyleRule("funk", ("funk",), lambda n, beats: funk_syncopation(n), excluded=("basic",)),
	StyleRule("fill", ("fill",), lambda n, beats: fill_build_up(n)),
	StyleRule("paradiddle", ("paradiddle",), lambda n, beats: cycle_starts(n, 8), excluded=("flam",)),
	StyleRule("stroke roll", ("stroke roll", "single stroke", "double stroke"), downbeats),
	StyleRule("groove", ("groove", "famous beat"), lambda n, beats: backbeat(n), common_time_only=True),
	StyleRule("technique", ("technique",), downbeats, common_time_only=True),
)


def match_style (text: str, time_signature: stickwork.time_signature.TimeSignature) -> typing.Optional[StyleRule]:

	"""Return the first style rule that applies to ``text``."""

	folded = text.casefold()

	for rule in STYLE_RULES:
		if rule.applies_to(folded, time_signature):
			return rule

	return None


def fill_accents (
	accents: typing.Optional[typing.Sequence[int]],
	text: str,
	time_signature: stickwork.time_signature.TimeSignature,
	notes_per_bar: int,
) -> typing.Optional[typing.List[int]]:

	"""
	Return the accent set a preset should carry.

	Out-of-range and duplicate indices are always removed. A style strategy
	only fills in accents that are missing or empty; a populated set is
	returned cleaned. ``None`` stays ``None`` when no style applies.
	"""

	cleaned = None if accents is None else clean_accents(accents, notes_per_bar)
	rule = match_style(text, time_signature)

	if rule is None:
		return cleaned

	if cleaned:
		return cleaned

	placed = rule.strategy(notes_per_bar, time_signature.numerator)
	logger.debug(f"Placed {rule.name} accents {placed}")

	return placed
