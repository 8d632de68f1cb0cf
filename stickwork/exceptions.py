"""Exceptions raised by the pattern engine.

Every error derives from :class:`StickworkError` so batch tools can catch
engine failures for one preset without hiding programming errors.
"""

import typing


class StickworkError (Exception):
	pass


class FormatError (StickworkError, ValueError):

	"""
	Text could not be parsed (time signature, phrase token, version string or preset document).
	"""


class InvalidSubdivisionError (StickworkError, ValueError):

	"""
	The subdivision does not divide evenly by the time signature's beat unit.
	"""


class PatternValidationError (StickworkError):

	"""
	A pattern breaks one or more of the bar invariants.

	Attributes:
		problems: Human readable description of each broken invariant.
	"""

	def __init__ (self, problems: typing.List[str]) -> None:

		super().__init__("; ".join(problems))
		self.problems = list(problems)
