"""Time signatures and the note count of one bar.

A bar's note count is the number of subdivision slots it holds::

	notes_per_bar = numerator * (subdivision / denominator)

``subdivision`` counts equal parts of a whole note (4 = quarters, 16 =
sixteenths, 12 = eighth-note triplets), so it has to divide evenly by the
beat unit. Uneven combinations raise :class:`InvalidSubdivisionError` rather
than producing a fractional bar.
"""

import dataclasses
import re
import typing

import stickwork.exceptions


BEAT_UNITS = (1, 2, 4, 8, 16, 32, 64)

SUBDIVISION_NAMES: typing.Dict[int, str] = {
	4: "Quarter notes",
	8: "Eighth notes",
	12: "Eighth note triplets",
	16: "Sixteenth notes",
	24: "Sixteenth note sextuplets",
	32: "Thirty-second notes",
}

_TIME_SIGNATURE_RE = re.compile(r"^\s*(\d+)\s*/\s*(\d+)\s*$")


@dataclasses.dataclass(frozen=True)
class TimeSignature:

	"""
	A bar's meter: ``numerator`` beats of ``1/denominator`` notes.
	"""

	numerator: int
	denominator: int

	def __post_init__ (self) -> None:
		if self.numerator <= 0 or self.denominator <= 0:
			raise stickwork.exceptions.FormatError(f"Time signature parts must be positive: {self.numerator}/{self.denominator}")
		if self.denominator not in BEAT_UNITS:
			raise stickwork.exceptions.FormatError(f"Denominator {self.denominator} is not a recognized beat unit {BEAT_UNITS}")

	def __str__ (self) -> str:
		return f"{self.numerator}/{self.denominator}"

	def notes_per_bar (self, subdivision: int) -> int:

		"""Return the exact note count of one bar at this subdivision."""

		return notes_per_bar(self, subdivision)


def parse_time_signature (text: str) -> TimeSignature:

	"""
	Parse ``"<numerator>/<denominator>"`` into a :class:`TimeSignature`.

	Whitespace around the parts is tolerated (``" 7 / 8 "``). Anything else,
	a zero part, or an unrecognized beat unit raises ``FormatError``.

	Example:
		```python
		ts = parse_time_signature("7/8")
		assert (ts.numerator, ts.denominator) == (7, 8)
		```
	"""

	if not isinstance(text, str):
		raise stickwork.exceptions.FormatError(f"Time signature must be text, got {type(text).__name__}")

	match = _TIME_SIGNATURE_RE.match(text)

	if match is None:
		raise stickwork.exceptions.FormatError(f"Time signature must look like '4/4', got {text!r}")

	return TimeSignature(numerator=int(match.group(1)), denominator=int(match.group(2)))


def notes_per_beat (time_signature: TimeSignature, subdivision: int) -> int:

	"""Return how many subdivision slots fall in one beat."""

	if subdivision <= 0:
		raise stickwork.exceptions.InvalidSubdivisionError(f"Subdivision must be positive, got {subdivision}")

	if subdivision % time_signature.denominator != 0:
		raise stickwork.exceptions.InvalidSubdivisionError(
			f"Subdivision {subdivision} does not divide evenly by the beat unit of {time_signature}"
		)

	return subdivision // time_signature.denominator


def notes_per_bar (time_signature: TimeSignature, subdivision: int) -> int:

	"""
	Return ``numerator * (subdivision / denominator)`` as an exact integer.

	Example:
		```python
		notes_per_bar(parse_time_signature("4/4"), 16)   # 16
		notes_per_bar(parse_time_signature("7/8"), 16)   # 14
		notes_per_bar(parse_time_signature("3/4"), 12)   # 9
		```
	"""

	return time_signature.numerator * notes_per_beat(time_signature, subdivision)


def notes_per_bar_from_per_beat (time_signature: TimeSignature, per_beat_subdivisions: typing.Sequence[int]) -> typing.Tuple[int, typing.List[int]]:

	"""
	Count the notes of a bar whose beats each carry their own subdivision.

	Returns the bar total and the per-beat counts, e.g. ``[16, 8, 4, 4]`` in
	4/4 gives ``(8, [4, 2, 1, 1])``.
	"""

	if len(per_beat_subdivisions) != time_signature.numerator:
		raise stickwork.exceptions.InvalidSubdivisionError(
			f"Expected {time_signature.numerator} per-beat subdivisions for {time_signature}, got {len(per_beat_subdivisions)}"
		)

	counts = [notes_per_beat(time_signature, subdivision) for subdivision in per_beat_subdivisions]

	return sum(counts), counts


def subdivision_name (subdivision: int) -> str:

	"""Human label for a subdivision value."""

	return SUBDIVISION_NAMES.get(subdivision, f"{subdivision}th notes")
