"""Render patterns to a Standard MIDI File.

Patterns play back to back, each repeated ``repeat`` times, on the General
MIDI drum channel. Accented notes are louder. Rest tokens and unknown voicing
letters produce no note.
"""

import logging
import typing

import mido

import stickwork.accents
import stickwork.constants
import stickwork.constants.gm_drums
import stickwork.constants.velocity
import stickwork.pattern


logger = logging.getLogger(__name__)

NOTE_LENGTH = 0.9


def voicing_notes (token: str) -> typing.List[int]:

	"""
	Return the GM notes for one voicing token (``"K+S"`` -> ``[36, 38]``).
	"""

	notes: typing.List[int] = []

	for part in token.upper().split("+"):
		if part in stickwork.constants.gm_drums.REST_TOKENS:
			continue
		note = stickwork.constants.gm_drums.VOICING_NOTE_MAP.get(part)
		if note is not None:
			notes.append(note)

	return notes


def ticks_per_note (subdivision: int, ticks_per_quarter: int = stickwork.constants.TICKS_PER_QUARTER) -> int:

	"""Length of one subdivision slot in ticks (a whole note is four quarters)."""

	if subdivision <= 0:
		raise ValueError("Subdivision must be positive")

	return (ticks_per_quarter * 4) // subdivision


def pattern_events (pattern: stickwork.pattern.Pattern, start_tick: int = 0, ticks_per_quarter: int = stickwork.constants.TICKS_PER_QUARTER) -> typing.Tuple[typing.List[typing.Tuple[int, mido.Message]], int]:

	"""
	Build absolute-tick note messages for one pattern.

	Returns the events and the tick at which the pattern ends.
	"""

	step = ticks_per_note(pattern.subdivision, ticks_per_quarter)
	length = max(1, int(step * NOTE_LENGTH))
	count = pattern.notes_per_bar

	if pattern.accents is not None:
		accented = set(pattern.accents)
	else:
		accented = set(stickwork.accents.accents_from_phrase(pattern.phrase))

	events: typing.List[typing.Tuple[int, mido.Message]] = []
	tick = start_tick
	channel = stickwork.constants.gm_drums.DRUM_CHANNEL

	for _ in range(pattern.repeat):

		for index in range(count):

			if pattern.drum_pattern:
				token = pattern.drum_pattern[index % len(pattern.drum_pattern)]
				velocity = stickwork.constants.velocity.ACCENT_VELOCITY if index in accented else stickwork.constants.velocity.DEFAULT_VELOCITY

				for note in voicing_notes(token):
					events.append((tick, mido.Message("note_on", channel=channel, note=note, velocity=velocity)))
					events.append((tick + length, mido.Message("note_off", channel=channel, note=note, velocity=0)))

			tick += step

	return events, tick


def pattern_to_midi (patterns: typing.Sequence[stickwork.pattern.Pattern], bpm: float = 120, ticks_per_quarter: int = stickwork.constants.TICKS_PER_QUARTER) -> mido.MidiFile:

	"""
	Build a single-track MIDI file from ``patterns``.
	"""

	if not patterns:
		raise ValueError("No patterns to export")

	if bpm <= 0:
		raise ValueError("BPM must be positive")

	mid = mido.MidiFile(type=0)
	mid.ticks_per_beat = ticks_per_quarter
	track = mido.MidiTrack()
	mid.tracks.append(track)

	first = patterns[0].time_signature

	events: typing.List[typing.Tuple[int, typing.Union[mido.Message, mido.MetaMessage]]] = [
		(0, mido.MetaMessage("set_tempo", tempo=mido.bpm2tempo(bpm))),
		(0, mido.MetaMessage("time_signature", numerator=first.numerator, denominator=first.denominator)),
	]

	tick = 0

	for pattern in patterns:
		pattern_messages, tick = pattern_events(pattern, start_tick=tick, ticks_per_quarter=ticks_per_quarter)
		events.extend(pattern_messages)

	# Stable sort keeps meta messages first and each note_on before its note_off.
	events.sort(key=lambda event: event[0])

	last_tick = 0

	for event_tick, message in events:
		message.time = event_tick - last_tick
		track.append(message)
		last_tick = event_tick

	track.append(mido.MetaMessage("end_of_track", time=max(0, tick - last_tick)))

	return mid


def export_midi (patterns: typing.Sequence[stickwork.pattern.Pattern], path: str, bpm: float = 120) -> None:

	"""Write ``patterns`` to ``path`` as a MIDI file."""

	mid = pattern_to_midi(patterns, bpm=bpm)
	mid.save(path)

	logger.info(f"Saved {len(patterns)} patterns to {path}")
