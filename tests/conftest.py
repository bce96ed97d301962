import pathlib
import typing

import mido
import pytest


# Ticks per beat for test files. At the default tempo (120 BPM) one beat is
# half a second, so 480 ticks == 0.5 s.
TICKS_PER_BEAT = 480


NoteEvent = typing.Tuple[int, str, int]


@pytest.fixture
def write_midi_file (tmp_path: pathlib.Path) -> typing.Callable[[typing.Sequence[NoteEvent]], pathlib.Path]:

	"""Return a function that writes ``(delta_ticks, type, note)`` events to a MIDI file."""

	def _write (events: typing.Sequence[NoteEvent], name: str = "test.mid") -> pathlib.Path:

		midi_file = mido.MidiFile(type=1, ticks_per_beat=TICKS_PER_BEAT)
		track = mido.MidiTrack()
		midi_file.tracks.append(track)

		for delta, message_type, note in events:
			track.append(mido.Message(message_type, channel=0, note=note, velocity=100 if message_type == 'note_on' else 0, time=delta))

		path = tmp_path / name
		midi_file.save(str(path))

		return path

	return _write
