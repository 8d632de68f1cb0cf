import mido
import pytest

import stickwork.constants.velocity
import stickwork.midi_export
import stickwork.pattern
import stickwork.time_signature


def _pattern (**overrides) -> stickwork.pattern.Pattern:

	fields = dict(
		time_signature = stickwork.time_signature.parse_time_signature("4/4"),
		subdivision = 16,
		phrase = [4, 4, 4, 4],
		drum_pattern = ["S"] * 16,
		sticking_pattern = ["R", "L"] * 8,
	)
	fields.update(overrides)
	return stickwork.pattern.Pattern(**fields)


def _note_ons (mid: mido.MidiFile) -> list:
	return [msg for msg in mid.tracks[0] if msg.type == "note_on"]


def test_voicing_notes () -> None:

	assert stickwork.midi_export.voicing_notes("K+S") == [36, 38]
	assert stickwork.midi_export.voicing_notes("h") == [42]
	assert stickwork.midi_export.voicing_notes("-") == []
	assert stickwork.midi_export.voicing_notes("Z") == []


@pytest.mark.parametrize("subdivision,ticks", [(4, 480), (8, 240), (12, 160), (16, 120), (32, 60)])
def test_ticks_per_note (subdivision: int, ticks: int) -> None:

	assert stickwork.midi_export.ticks_per_note(subdivision) == ticks


def test_one_bar_timing () -> None:

	"""Sixteen sixteenth notes fill exactly four quarter notes."""

	mid = stickwork.midi_export.pattern_to_midi([_pattern(accents=[0])])

	assert mid.type == 0
	assert len(_note_ons(mid)) == 16
	assert sum(msg.time for msg in mid.tracks[0]) == 4 * 480
	assert mid.tracks[0][-1].type == "end_of_track"


def test_accented_notes_are_louder () -> None:

	velocities = [msg.velocity for msg in _note_ons(stickwork.midi_export.pattern_to_midi([_pattern(accents=[0, 8])]))]

	assert velocities[0] == stickwork.constants.velocity.ACCENT_VELOCITY
	assert velocities[8] == stickwork.constants.velocity.ACCENT_VELOCITY
	assert velocities.count(stickwork.constants.velocity.DEFAULT_VELOCITY) == 14


def test_phrase_starts_are_accented_without_accents () -> None:

	velocities = [msg.velocity for msg in _note_ons(stickwork.midi_export.pattern_to_midi([_pattern()]))]

	assert [i for i, v in enumerate(velocities) if v == stickwork.constants.velocity.ACCENT_VELOCITY] == [0, 4, 8, 12]


def test_repeat_and_rests () -> None:

	pattern = _pattern(drum_pattern=["K+S", "-"] * 8, repeat=2)
	mid = stickwork.midi_export.pattern_to_midi([pattern])

	assert len(_note_ons(mid)) == 2 * 8 * 2
	assert sum(msg.time for msg in mid.tracks[0]) == 2 * 4 * 480


def test_meta_messages () -> None:

	mid = stickwork.midi_export.pattern_to_midi([_pattern(
		time_signature = stickwork.time_signature.parse_time_signature("7/8"),
		phrase = [14],
		drum_pattern = ["S"] * 14,
		sticking_pattern = ["R"] * 14,
	)], bpm=90)

	tempo = [msg for msg in mid.tracks[0] if msg.type == "set_tempo"]
	signature = [msg for msg in mid.tracks[0] if msg.type == "time_signature"]

	assert tempo[0].tempo == mido.bpm2tempo(90)
	assert (signature[0].numerator, signature[0].denominator) == (7, 8)


def test_rejects_empty_input () -> None:

	with pytest.raises(ValueError):
		stickwork.midi_export.pattern_to_midi([])

	with pytest.raises(ValueError):
		stickwork.midi_export.pattern_to_midi([_pattern()], bpm=0)


def test_export_midi_writes_file (tmp_path) -> None:

	path = str(tmp_path / "practice.mid")
	stickwork.midi_export.export_midi([_pattern(), _pattern(repeat=3)], path)

	loaded = mido.MidiFile(path)

	assert len(_note_ons(loaded)) == 16 * 4
