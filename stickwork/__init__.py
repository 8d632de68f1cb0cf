"""
Stickwork - rhythmic pattern fitting for drum practice material.

A bar, given a time signature and a subdivision, holds an exact number of
notes. Stickwork keeps four parallel lines in step with that count: the drum
voicing (``S S K S``), the hand sticking (``R L R R``), the phrase grouping
(``4 4 4 4``) and the accents.

What it does:

- **Note counts.** ``"7/8"`` at sixteenth notes is 14 notes; subdivisions
  that do not divide the beat unit are rejected instead of rounded.
- **Base cycles.** Detect the shortest unit a line repeats and stretch it
  to any bar length, so a four-note groove or a paradiddle fills 12, 16 or
  32 slots without changing character.
- **Rudiments.** A catalog of standard stickings and an ordered text matcher
  that recognises them from a preset's name, description and tags.
- **Accents.** Latin clave, funk syncopation, fill build-ups, backbeats and
  more, applied only where a preset has no accents of its own.
- **Phrases.** Rebalance note groups that no longer add up to the bar.
- **Polyrhythms.** Independent placements for two limbs, e.g. 3 against 2.
- **Generation.** Seeded random patterns that satisfy every invariant.
- **Batch repair.** Normalize a whole JSON preset collection, reporting
  presets that cannot be repaired without stopping the rest.
- **MIDI export.** Render patterns to a Standard MIDI File.

Minimal example:

    ```python
    import random
    import stickwork

    pattern = stickwork.generate("4/4", 16, rng=random.Random(7))
    fixed = stickwork.normalize(pattern)
    ```

Package-level exports: ``Pattern``, ``PresetMetadata``, ``TimeSignature``,
``generate``, ``normalize``, ``parse_time_signature``.
"""

import stickwork.generator
import stickwork.pattern
import stickwork.repair
import stickwork.time_signature


Pattern = stickwork.pattern.Pattern
PresetMetadata = stickwork.pattern.PresetMetadata
TimeSignature = stickwork.time_signature.TimeSignature
generate = stickwork.generator.generate
normalize = stickwork.repair.normalize
parse_time_signature = stickwork.time_signature.parse_time_signature
