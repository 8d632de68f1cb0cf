import typing

import stickwork.exceptions


Token = typing.Union[str, int]


def parse (text: typing.Union[str, typing.Sequence[str], None]) -> typing.List[str]:

	"""
	Split a token line on runs of whitespace.

	Empty tokens are dropped and order is kept. A list that is already split
	is copied as-is and ``None`` gives an empty sequence.

	Example:
		```python
		parse("  S  S K+S\\tS ")   # ["S", "S", "K+S", "S"]
		```
	"""

	if text is None:
		return []

	if isinstance(text, str):
		return text.split()

	if not isinstance(text, (list, tuple)):
		raise stickwork.exceptions.FormatError(f"Token line must be text or a list, got {type(text).__name__}")

	return [str(token) for token in text]


def parse_numbers (text: typing.Union[str, typing.Sequence[int], None]) -> typing.List[int]:

	"""
	Parse a phrase line such as ``"4 4 4 4"`` into positive integers.
	"""

	if text is not None and not isinstance(text, str):
		if not isinstance(text, (list, tuple)):
			raise stickwork.exceptions.FormatError(f"Phrase must be text or a list, got {type(text).__name__}")
		values = list(text)
		for value in values:
			if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
				raise stickwork.exceptions.FormatError(f"Phrase entries must be positive integers, got {value!r}")
		return values

	numbers: typing.List[int] = []

	for token in parse(text):

		if not token.isdecimal() or int(token) <= 0:
			raise stickwork.exceptions.FormatError(f"Phrase token {token!r} is not a positive integer")

		numbers.append(int(token))

	return numbers


def format (sequence: typing.Iterable[Token]) -> str:

	"""Join tokens with single spaces (the inverse of :func:`parse`)."""

	return " ".join(str(token) for token in sequence)
