"""Chord detection over MIDI files.

Replays note messages, keeps track of which notes are sounding across all
channels, and identifies a chord each time the sounding set changes. Messages
that share a timestamp are applied together, so a chord struck as several
``note_on`` messages at the same instant is identified once.

Sounding sets of three or four notes go through `chordlens.chords.identify_chord`.
Larger sets (e.g. a piano chord with doubled octaves) go straight to voicing
resolution, which reduces them to their pitch classes first.

Example:
	```python
	import chordlens.midi_file

	for event in chordlens.midi_file.chords_in_midi_file("song.mid"):
		print(f"{event.time:7.2f}s  {event.chord.name}")
	```
"""

import dataclasses
import logging
import os
import typing

import mido

import chordlens.chords
import chordlens.voicings


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class ChordEvent:

	"""
	A chord identified at a point in time.
	"""

	time: float
	notes: typing.Tuple[int, ...]
	chord: chordlens.chords.Chord


def _is_note_on (message: mido.Message) -> bool:

	return message.type == 'note_on' and message.velocity > 0


def _is_note_off (message: mido.Message) -> bool:

	return message.type == 'note_off' or (message.type == 'note_on' and message.velocity == 0)


def sounding_snapshots (messages: typing.Iterable[mido.Message]) -> typing.Iterator[typing.Tuple[float, typing.Tuple[int, ...]]]:

	"""Yield ``(time, notes)`` every time the set of sounding notes changes.

	Parameters:
		messages: mido messages whose ``time`` is the delta in seconds from the
			previous message, as produced by iterating a ``mido.MidiFile``.

	Returns:
		An iterator of absolute times and sorted, distinct sounding notes.
	"""

	now = 0.0
	held: typing.Set[typing.Tuple[int, int]] = set()
	previous: typing.Tuple[int, ...] = ()

	for message in messages:

		if message.time > 0:

			current = tuple(sorted({note for _, note in held}))

			if current != previous:
				yield now, current
				previous = current

			now += message.time

		if _is_note_on(message):
			held.add((message.channel, message.note))

		elif _is_note_off(message):
			held.discard((message.channel, message.note))

	current = tuple(sorted({note for _, note in held}))

	if current != previous:
		yield now, current


def identify_sounding (notes: typing.Sequence[int]) -> typing.Optional[chordlens.chords.Chord]:

	"""
	Identify a chord from any number of simultaneously sounding notes.
	"""

	if len(notes) < 3:
		return None

	if len(notes) > 4:
		return chordlens.voicings.identify_voicing(notes)

	return chordlens.chords.identify_chord(notes)


def chords_in_messages (messages: typing.Iterable[mido.Message]) -> typing.Iterator[ChordEvent]:

	"""Yield a ``ChordEvent`` each time a new chord starts sounding.

	A chord that keeps the same name while notes are added or released (e.g.
	a doubled root joining a triad) is reported once. Moments where no chord
	is recognised reset this, so the same chord struck twice is reported twice.
	"""

	last_name: typing.Optional[str] = None

	for time, notes in sounding_snapshots(messages):

		chord = identify_sounding(notes)

		if chord is None:
			last_name = None
			continue

		if chord.name != last_name:
			yield ChordEvent(time=time, notes=notes, chord=chord)

		last_name = chord.name


def chords_in_midi_file (path: typing.Union[str, os.PathLike]) -> typing.List[ChordEvent]:

	"""Identify the chords played in a standard MIDI file.

	Parameters:
		path: Path to a ``.mid`` file.

	Returns:
		Chord events in playback order, timed in seconds from the start.

	Raises:
		FileNotFoundError: If the file does not exist.
	"""

	midi_file = mido.MidiFile(path)

	logger.info(f"Scanning {path} ({len(midi_file.tracks)} tracks) for chords")

	events = list(chords_in_messages(midi_file))

	logger.info(f"Found {len(events)} chord changes in {path}")

	return events
