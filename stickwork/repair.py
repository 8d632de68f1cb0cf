"""Bring a stored pattern back into line with its bar.

:func:`normalize` runs the corrective passes in a fixed order, since each
pass relies on the note count and base cycles settled by the ones before it:

1. Resolve the note count from the time signature and subdivision.
2. Fit the voicing line (optionally forcing a disco four-on-the-floor).
3. Replace the sticking with the catalog rudiment, or fit it.
4. Clean the accents and fill them in from the preset's style.
5. Rebalance the phrase.

The input pattern is never modified; a new one is returned.
"""

import logging
import typing

import stickwork.accents
import stickwork.fitting
import stickwork.pattern
import stickwork.phrase
import stickwork.rudiments
import stickwork.time_signature


logger = logging.getLogger(__name__)

FOUR_ON_THE_FLOOR_NOTE = " - four-on-the-floor kick pattern"

_ALL_ACCENT_PHRASES = ("all accent", "full accent")
_EVERY_OTHER_PHRASES = ("every other", "every-other")


def kick_count (drum_pattern: typing.Sequence[str]) -> int:
	return sum(1 for token in drum_pattern if "K" in token.upper())


def four_on_the_floor (time_signature: stickwork.time_signature.TimeSignature, notes_per_bar: int) -> typing.List[str]:

	"""
	Kick on every beat, snare stacked on beats 2 and 4, hi-hat in between.

	Example:
		```python
		four_on_the_floor(parse_time_signature("4/4"), 8)
		# ["K", "H", "K+S", "H", "K", "H", "K+S", "H"]
		```
	"""

	beats = time_signature.numerator
	per_beat = notes_per_bar // beats
	voicing: typing.List[str] = []

	for beat in range(beats):
		voicing.append("K+S" if beat % 2 == 1 else "K")
		voicing.extend(["H"] * (per_beat - 1))

	return voicing


def needs_four_on_the_floor (pattern: stickwork.pattern.Pattern, text: str, notes_per_bar: int) -> bool:

	"""A disco preset with fewer kicks than beats, on a grid where every beat starts a slot."""

	beats = pattern.time_signature.numerator

	if "disco" not in text:
		return False

	if notes_per_bar % beats != 0:
		return False

	return kick_count(pattern.drum_pattern) < beats


def four_on_the_floor_description (description: str) -> str:

	"""Append the four-on-the-floor note to a description unless it already says so."""

	if "four-on-the-floor" in description.lower():
		return description

	if description.endswith("."):
		description = description[:-1]

	return description + FOUR_ON_THE_FLOOR_NOTE


def thin_accents (accents: typing.Optional[typing.List[int]], pattern: stickwork.pattern.Pattern, text: str, notes_per_bar: int) -> typing.Optional[typing.List[int]]:

	"""
	Reduce an "accent everything" set to one accent per beat, or to every
	other note when the exercise is named for that.

	Exercises that are about accenting every note (the text says so) are
	left alone, as are sets of four or fewer.
	"""

	if not accents or len(accents) <= 4:
		return accents

	if any(phrase in text for phrase in _ALL_ACCENT_PHRASES):
		return accents

	played = [t for t in pattern.drum_pattern if t != "K" and not t.startswith("(")]

	if len(accents) != len(played):
		return accents

	if any(phrase in text for phrase in _EVERY_OTHER_PHRASES):
		return stickwork.accents.every_other(notes_per_bar)

	return stickwork.accents.downbeats(notes_per_bar, pattern.time_signature.numerator)


def normalize (pattern: stickwork.pattern.Pattern, metadata: typing.Optional[stickwork.pattern.PresetMetadata] = None, apply_disco_voicing: bool = True) -> stickwork.pattern.Pattern:

	"""
	Return a copy of ``pattern`` that satisfies the bar invariants.

	Parameters:
		pattern: The stored pattern. Not modified.
		metadata: Preset text used to recognise rudiments and styles. Without
			it only the structural passes run.
		apply_disco_voicing: When a disco preset lacks a kick on every beat,
			replace its voicing with a four-on-the-floor groove. Pass False
			to leave the voicing alone.

	Raises:
		InvalidSubdivisionError: The subdivision does not fit the time signature.

	Example:
		```python
		pattern = Pattern.from_dict({"timeSignature": "4/4", "subdivision": 16,
			"phrase": "3 3 3 3", "drumPattern": "S S K S", "stickingPattern": "R L"})
		fixed = normalize(pattern)
		fixed.phrase   # [4, 4, 4, 4]
		```
	"""

	result = pattern.copy()
	count = result.notes_per_bar
	text = metadata.text() if metadata is not None else ""

	if len(result.drum_pattern) != count:
		result.drum_pattern = stickwork.fitting.fit(result.drum_pattern, count)

	if apply_disco_voicing and needs_four_on_the_floor(result, text, count):
		logger.info(f"Applying four-on-the-floor voicing ({kick_count(result.drum_pattern)} kicks in {result.time_signature})")
		result.drum_pattern = four_on_the_floor(result.time_signature, count)

	rudiment = stickwork.rudiments.match_rudiment(text) if text else None

	if rudiment is not None:
		result.sticking_pattern = stickwork.rudiments.rudiment_sticking(rudiment, count)

	elif len(result.sticking_pattern) != count:
		result.sticking_pattern = stickwork.fitting.fit(result.sticking_pattern, count)

	accents = result.accents

	if accents is not None:
		accents = stickwork.accents.clean_accents(accents, count)

	accents = thin_accents(accents, result, text, count)
	result.accents = stickwork.accents.fill_accents(accents, text, result.time_signature, count)

	result.phrase = stickwork.phrase.balance_phrase(result.phrase, result.time_signature, count)

	return result
