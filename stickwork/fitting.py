"""Base cycle detection and expansion of token sequences.

Every repair in the engine comes down to the same move: find the shortest
unit a sequence repeats, then repeat that unit out to the bar's note count.
A hand-written ``"S S K S"`` groove or a paradiddle skeleton can be stretched
to any bar length this way without changing what it sounds like.
"""

import typing

T = typing.TypeVar("T")


def is_periodic (tokens: typing.Sequence[T], cycle: int) -> bool:

	"""Return True when ``tokens[i] == tokens[i % cycle]`` for every index."""

	if cycle <= 0:
		return not tokens

	return all(tokens[i] == tokens[i % cycle] for i in range(cycle, len(tokens)))


def detect_base_cycle (tokens: typing.Sequence[T]) -> int:

	"""
	Return the length of the smallest repeating unit of ``tokens``.

	Only divisors of the full length are considered, so the result always
	divides ``len(tokens)``. A sequence with no shorter period returns its own
	length and an empty sequence returns 0.

	Example:
		```python
		detect_base_cycle(["R", "L", "R", "L"])        # 2
		detect_base_cycle(["R", "L", "R", "R", "L"])   # 5
		```
	"""

	length = len(tokens)

	for cycle in range(1, length):
		if length % cycle == 0 and is_periodic(tokens, cycle):
			return cycle

	return length


def base_cycle (tokens: typing.Sequence[T]) -> typing.List[T]:

	"""Return the repeating unit itself."""

	return list(tokens[:detect_base_cycle(tokens)])


def expand (tokens: typing.Sequence[T], target_length: int) -> typing.List[T]:

	"""
	Repeat ``tokens`` cyclically until it is exactly ``target_length`` long.

	Longer input is truncated. Empty input is returned unchanged, there is
	nothing to repeat.

	Example:
		```python
		expand(["S", "S", "K", "S"], 6)   # ["S", "S", "K", "S", "S", "S"]
		```
	"""

	if target_length < 0:
		raise ValueError(f"Target length cannot be negative ({target_length})")

	if not tokens:
		return list(tokens)

	return [tokens[i % len(tokens)] for i in range(target_length)]


def fit (tokens: typing.Sequence[T], target_length: int) -> typing.List[T]:

	"""Expand the base cycle of ``tokens`` to ``target_length``."""

	return expand(base_cycle(tokens), target_length)
