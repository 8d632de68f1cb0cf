"""Fresh random patterns for the interactive generator.

All randomness comes from the ``random.Random`` passed in, so a seed
reproduces the exact same pattern::

	pattern = stickwork.generator.generate("4/4", 16, rng=random.Random(42))
"""

import logging
import random
import typing

import stickwork.accents
import stickwork.constants.random_sets
import stickwork.fitting
import stickwork.pattern
import stickwork.time_signature


logger = logging.getLogger(__name__)

PRACTICE_PAD_TOKEN = "S"


def sticking_for_drum_pattern (drum_pattern: typing.Sequence[str], notes_per_bar: int, rng: random.Random, practice_pad: bool = False) -> typing.List[str]:

	"""
	Derive a sticking line for a voicing line.

	Kick voicings are played by the foot (``K``), rests get a random hand and
	every other note alternates hands, starting from a random hand.
	"""

	if not drum_pattern:
		return []

	sticking: typing.List[str] = []
	hand = "R" if rng.random() > 0.5 else "L"

	for i in range(notes_per_bar):

		token = drum_pattern[i % len(drum_pattern)].upper()

		if "K" in token and not practice_pad:
			sticking.append("K")

		elif token in ("", "-"):
			sticking.append("R" if rng.random() > 0.5 else "L")

		else:
			sticking.append(hand)
			hand = "L" if hand == "R" else "R"

	return sticking


def generate (time_signature: str, subdivision: int, rng: typing.Optional[random.Random] = None, practice_pad: bool = False) -> stickwork.pattern.Pattern:

	"""
	Build a random pattern that satisfies every bar invariant.

	Parameters:
		time_signature: Meter text such as ``"7/8"``.
		subdivision: Parts per whole note; must divide by the beat unit.
		rng: Random source. A new unseeded one is used when omitted.
		practice_pad: Voice every note as a snare stroke and keep the kick
			out of the sticking.

	Raises:
		FormatError: The time signature could not be parsed.
		InvalidSubdivisionError: ``subdivision`` does not fit the beat unit.
	"""

	if rng is None:
		rng = random.Random()

	meter = stickwork.time_signature.parse_time_signature(time_signature)
	count = stickwork.time_signature.notes_per_bar(meter, subdivision)

	accents = stickwork.accents.random_accents(count, rng)
	phrase = stickwork.accents.phrase_from_accents(accents, count)

	if practice_pad:
		drum_pattern = [PRACTICE_PAD_TOKEN] * count
	else:
		cycle = rng.choice(stickwork.constants.random_sets.DRUM_PATTERNS)
		drum_pattern = stickwork.fitting.expand(cycle, count)

	sticking = sticking_for_drum_pattern(drum_pattern, count, rng, practice_pad)
	repeat = rng.randint(1, stickwork.constants.random_sets.MAX_REPEAT)

	logger.debug(f"Generated {meter} at subdivision {subdivision}: {count} notes, {len(accents)} accents")

	return stickwork.pattern.Pattern(
		time_signature = meter,
		subdivision = subdivision,
		phrase = phrase,
		drum_pattern = drum_pattern,
		sticking_pattern = sticking,
		repeat = repeat,
		accents = accents
	)


def generate_random (rng: typing.Optional[random.Random] = None, practice_pad: bool = False) -> stickwork.pattern.Pattern:

	"""Pick a time signature and a subdivision that fits it, then :func:`generate`."""

	if rng is None:
		rng = random.Random()

	time_signature = rng.choice(stickwork.constants.random_sets.TIME_SIGNATURES)
	denominator = stickwork.time_signature.parse_time_signature(time_signature).denominator

	subdivisions = [s for s in stickwork.constants.random_sets.SUBDIVISIONS if s % denominator == 0]

	return generate(time_signature, rng.choice(subdivisions), rng=rng, practice_pad=practice_pad)
