"""General MIDI Level 1 notes for voicing tokens.

Voicing tokens are single letters; a stacked voicing such as ``K+S`` plays
each letter at once. Drums go on channel 10 (0-indexed channel 9).
"""

import typing


DRUM_CHANNEL = 9

KICK_1 = 36
SNARE_1 = 38
LOW_FLOOR_TOM = 41
HI_HAT_CLOSED = 42
HI_HAT_OPEN = 46
HIGH_MID_TOM = 48
CRASH_1 = 49
RIDE_1 = 51

VOICING_NOTE_MAP: typing.Dict[str, int] = {
	"K": KICK_1,
	"S": SNARE_1,
	"T": HIGH_MID_TOM,
	"F": LOW_FLOOR_TOM,
	"H": HI_HAT_CLOSED,
	"O": HI_HAT_OPEN,
	"C": CRASH_1,
	"I": RIDE_1,
}

# Tokens that sound nothing.
REST_TOKENS = frozenset({"-", "R", "X"})
