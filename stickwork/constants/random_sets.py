"""Pools the pattern generator draws from.

Drum patterns are base cycles; the generator repeats them to fill the bar.
"""

TIME_SIGNATURES = ("2/4", "3/4", "4/4", "5/4", "6/8", "7/8", "12/8")

SUBDIVISIONS = (4, 8, 12, 16, 24, 32)

DRUM_PATTERNS = (
	("S", "S", "S", "S"),
	("S", "S", "K", "S"),
	("K", "S", "S", "K"),
	("S", "K", "S", "K"),
	("K", "S", "K", "S"),
	("S", "S", "K", "K"),
	("K+H", "H", "S+H", "H"),
	("K", "H", "S", "H", "K", "K", "S", "H"),
	("S", "T", "F", "K"),
	("S", "S", "T", "T", "F", "F"),
)

MAX_REPEAT = 4
