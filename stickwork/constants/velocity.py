"""MIDI velocity constants.

Velocity is the MIDI attack strength (0-127). Exported patterns use two
levels: accented notes and everything else.
"""

ACCENT_VELOCITY = 100           # Accented notes
DEFAULT_VELOCITY = 80           # Unaccented notes

# MIDI standard range
MIN_VELOCITY = 0
MAX_VELOCITY = 127
