import dataclasses
import typing

import stickwork.exceptions
import stickwork.time_signature
import stickwork.tokens


MAX_NUMERATOR = 32


@dataclasses.dataclass
class PresetMetadata:

	"""
	Free text describing a preset. Matchers read it; the engine never changes it.
	"""

	name: str = ""
	description: str = ""
	tags: typing.List[str] = dataclasses.field(default_factory=list)

	def text (self) -> str:

		"""Case-folded ``name description tags`` used as matcher input."""

		return " ".join([self.name or "", self.description or "", " ".join(self.tags or [])]).casefold()


@dataclasses.dataclass
class Pattern:

	"""
	One bar of practice material plus how many times it repeats.

	Attributes:
		time_signature: Meter of the bar.
		subdivision: Parts per whole note (16 = sixteenth notes).
		phrase: Note-group sizes, summing to the bar's note count.
		drum_pattern: One voicing token per note (``S``, ``K``, ``K+S``, ``-``).
		sticking_pattern: One hand token per note (``R``, ``L``, ``lR``, ``K``).
		repeat: Number of bars to play.
		accents: Accented note indices, or None when the pattern has none set.
		left_foot: Left foot (hi-hat) ostinato enabled.
		right_foot: Right foot (kick) ostinato enabled.
	"""

	time_signature: stickwork.time_signature.TimeSignature
	subdivision: int
	phrase: typing.List[int]
	drum_pattern: typing.List[str]
	sticking_pattern: typing.List[str]
	repeat: int = 1
	accents: typing.Optional[typing.List[int]] = None
	left_foot: bool = False
	right_foot: bool = False

	@property
	def notes_per_bar (self) -> int:
		return self.time_signature.notes_per_bar(self.subdivision)

	def copy (self) -> "Pattern":

		"""Return a copy whose lists can be changed without touching this one."""

		return dataclasses.replace(
			self,
			phrase = list(self.phrase),
			drum_pattern = list(self.drum_pattern),
			sticking_pattern = list(self.sticking_pattern),
			accents = None if self.accents is None else list(self.accents)
		)

	@classmethod
	def from_dict (cls, data: typing.Mapping[str, typing.Any]) -> "Pattern":

		"""
		Build a pattern from the persisted camelCase fields.

		Raises ``FormatError`` when the time signature or phrase cannot be parsed.
		"""

		subdivision = data.get("subdivision", 16)

		if isinstance(subdivision, bool) or not isinstance(subdivision, int):
			raise stickwork.exceptions.FormatError(f"Subdivision must be an integer, got {subdivision!r}")

		repeat = data.get("repeat", 1)

		if isinstance(repeat, bool) or not isinstance(repeat, int) or repeat < 1:
			raise stickwork.exceptions.FormatError(f"Repeat must be a positive integer, got {repeat!r}")

		accents = data.get("accents")

		if accents is not None:
			if not isinstance(accents, list) or not all(isinstance(a, int) and not isinstance(a, bool) for a in accents):
				raise stickwork.exceptions.FormatError(f"Accents must be a list of integers, got {accents!r}")
			accents = list(accents)

		return cls(
			time_signature = stickwork.time_signature.parse_time_signature(data.get("timeSignature", "4/4")),
			subdivision = subdivision,
			phrase = stickwork.tokens.parse_numbers(data.get("phrase")),
			drum_pattern = stickwork.tokens.parse(data.get("drumPattern")),
			sticking_pattern = stickwork.tokens.parse(data.get("stickingPattern")),
			repeat = repeat,
			accents = accents,
			left_foot = bool(data.get("leftFoot", False)),
			right_foot = bool(data.get("rightFoot", False))
		)

	def to_dict (self) -> typing.Dict[str, typing.Any]:

		"""Return the persisted camelCase representation."""

		data: typing.Dict[str, typing.Any] = {
			"timeSignature": str(self.time_signature),
			"subdivision": self.subdivision,
			"phrase": stickwork.tokens.format(self.phrase),
			"drumPattern": stickwork.tokens.format(self.drum_pattern),
			"stickingPattern": stickwork.tokens.format(self.sticking_pattern),
			"repeat": self.repeat,
			"leftFoot": self.left_foot,
			"rightFoot": self.right_foot,
		}

		if self.accents is not None:
			data["accents"] = list(self.accents)

		return data


def validate (pattern: Pattern) -> typing.List[str]:

	"""
	Return a list of broken invariants (empty when the pattern is valid).
	"""

	problems: typing.List[str] = []

	if pattern.time_signature.numerator > MAX_NUMERATOR:
		problems.append(f"numerator {pattern.time_signature.numerator} is above {MAX_NUMERATOR}")

	try:
		count = pattern.notes_per_bar
	except stickwork.exceptions.InvalidSubdivisionError as exc:
		return problems + [str(exc)]

	if len(pattern.drum_pattern) != count:
		problems.append(f"drum pattern has {len(pattern.drum_pattern)} tokens, expected {count}")

	if len(pattern.sticking_pattern) != count:
		problems.append(f"sticking pattern has {len(pattern.sticking_pattern)} tokens, expected {count}")

	if sum(pattern.phrase) != count:
		problems.append(f"phrase sums to {sum(pattern.phrase)}, expected {count}")

	if pattern.repeat < 1:
		problems.append(f"repeat must be positive, got {pattern.repeat}")

	if pattern.accents is not None:
		if len(set(pattern.accents)) != len(pattern.accents):
			problems.append("accents contain duplicates")
		out_of_range = [a for a in pattern.accents if not 0 <= a < count]
		if out_of_range:
			problems.append(f"accents out of range: {out_of_range}")

	return problems


def require_valid (pattern: Pattern) -> Pattern:

	"""Return ``pattern`` unchanged or raise ``PatternValidationError``."""

	problems = validate(pattern)

	if problems:
		raise stickwork.exceptions.PatternValidationError(problems)

	return pattern
