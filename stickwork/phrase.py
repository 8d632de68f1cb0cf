import typing

import stickwork.time_signature


def beat_groups (time_signature: stickwork.time_signature.TimeSignature, notes_per_bar: int) -> typing.List[int]:

	"""
	Split a bar into one group per beat.

	When the note count does not divide by the number of beats the leftover
	notes go one each to the leading groups, so the groups always sum to
	``notes_per_bar``.

	Example:
		```python
		beat_groups(parse_time_signature("4/4"), 16)   # [4, 4, 4, 4]
		beat_groups(parse_time_signature("3/4"), 10)   # [4, 3, 3]
		```
	"""

	beats = time_signature.numerator
	size, remainder = divmod(notes_per_bar, beats)

	return [size + 1 if i < remainder else size for i in range(beats)]


def balance_phrase (phrase: typing.Sequence[int], time_signature: stickwork.time_signature.TimeSignature, notes_per_bar: int) -> typing.List[int]:

	"""
	Return ``phrase`` if it already sums to the bar, otherwise per-beat groups.

	The mismatched phrase is replaced wholesale rather than patched, because
	a phrase that is off by some notes no longer says where the groups were
	meant to fall.
	"""

	if sum(phrase) == notes_per_bar:
		return list(phrase)

	return beat_groups(time_signature, notes_per_bar)
