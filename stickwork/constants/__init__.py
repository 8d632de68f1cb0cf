"""Constants for Stickwork.

- ``stickwork.constants.gm_drums`` - General MIDI notes for voicing tokens
- ``stickwork.constants.velocity`` - MIDI velocities for plain and accented notes
- ``stickwork.constants.random_sets`` - Pools the generator draws from
"""

# Standard MIDI file resolution used for export.

TICKS_PER_QUARTER = 480
