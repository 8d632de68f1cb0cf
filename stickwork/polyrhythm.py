"""Two limbs playing different pulse counts over one shared cycle.

Only timing is produced. Voicing and sticking for each limb are up to the
caller.
"""

import dataclasses
import math
import typing


VOICE_TOKENS: typing.Dict[str, str] = {
	"snare": "S",
	"kick": "K",
	"hi-hat": "H",
	"tom": "T",
	"floor": "F",
}

REST_TOKEN = "-"


@dataclasses.dataclass(frozen=True)
class PolyrhythmCycle:

	"""
	Note indices for each limb of an ``a``-against-``b`` polyrhythm.
	"""

	a: int
	b: int
	cycle_length: int
	limb_a: typing.Tuple[int, ...]
	limb_b: typing.Tuple[int, ...]


def _round_half_up (value: float) -> int:
	return math.floor(value + 0.5)


def limb_positions (pulses: int, cycle_length: int) -> typing.List[int]:

	"""Spread ``pulses`` evenly over ``cycle_length`` slots."""

	if pulses <= 0:
		raise ValueError(f"Pulse count must be positive, got {pulses}")

	if cycle_length <= 0:
		raise ValueError(f"Cycle length must be positive, got {cycle_length}")

	return sorted({_round_half_up(i * cycle_length / pulses) % cycle_length for i in range(pulses)})


def resolve_polyrhythm (a: int, b: int, cycle_length: int) -> PolyrhythmCycle:

	"""
	Place ``a`` notes against ``b`` notes within one cycle.

	Example:
		```python
		cycle = resolve_polyrhythm(3, 2, 12)
		cycle.limb_a   # (0, 4, 8)
		cycle.limb_b   # (0, 6)
		```
	"""

	return PolyrhythmCycle(
		a = a,
		b = b,
		cycle_length = cycle_length,
		limb_a = tuple(limb_positions(a, cycle_length)),
		limb_b = tuple(limb_positions(b, cycle_length))
	)


def shared_cycle_length (a: int, b: int) -> int:

	"""The smallest grid on which both limbs land exactly (lcm of the ratio)."""

	if a <= 0 or b <= 0:
		raise ValueError(f"Ratio parts must be positive, got {a}:{b}")

	return a * b // math.gcd(a, b)


def limb_voicing (indices: typing.Iterable[int], cycle_length: int, voice: str = "snare") -> typing.List[str]:

	"""Render a limb as voicing tokens with rests between its notes."""

	token = VOICE_TOKENS.get(voice, "S")
	hits = set(indices)

	return [token if i in hits else REST_TOKEN for i in range(cycle_length)]
