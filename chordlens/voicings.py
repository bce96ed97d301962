"""Open and doubled voicing resolution.

A voicing spreads a chord's pitch classes across octaves or doubles some of them,
e.g. ``[48, 64, 67]`` (C3 E4 G4) or ``[60, 64, 67, 72]`` (C4 E4 G4 C5). Neither
matches a close-position shape directly, so the notes are first reduced to one
note per pitch class and then compacted into a close stack above each candidate
root in turn. The first stack that `chordlens.chords.identify_known_chord`
recognises gives the answer.

Compact stacks are built in the lowest playable octave of a piano: A, A# and B
start at MIDI 21-23 (octave 0) and every other pitch class starts at octave 1
(MIDI 24-32).

Example:
	```python
	from chordlens.voicings import identify_voicing

	chord = identify_voicing([48, 64, 67])
	chord.name          # "C"
	chord.notes         # (24, 28, 31)
	chord.is_voicing    # True
	```
"""

from __future__ import annotations

import dataclasses
import logging
import typing

import chordlens.chords


logger = logging.getLogger(__name__)


def unique_pitch_classes (notes: typing.Iterable[int]) -> typing.List[int]:

	"""
	Sort the notes and keep only the lowest note of each pitch class.
	"""

	seen: typing.Set[int] = set()
	unique: typing.List[int] = []

	for note in sorted(notes):
		if note % 12 not in seen:
			seen.add(note % 12)
			unique.append(note)

	return unique


def lowest_octave_note (note: int) -> int:

	"""Return the lowest playable piano key with the same pitch class.

	Example:
		```python
		lowest_octave_note(60)  # 24 (C1)
		lowest_octave_note(69)  # 21 (A0)
		```
	"""

	pitch_class = note % 12

	# A0, A#0 and B0 are the only keys below C1.
	octaves = 2 if pitch_class < 9 else 1

	return pitch_class + 12 * octaves


def shortest_interval (from_note: int, to_note: int) -> int:

	"""
	Return the ascending distance (0-11) from one pitch class to another.
	"""

	return (to_note - from_note) % 12


def compact_candidate (unique_notes: typing.Sequence[int], root_index: int) -> typing.List[int]:

	"""Stack the notes closely above the note at ``root_index``.

	The root goes to its lowest playable octave. The other notes follow in
	their original order, each placed at the smallest ascending distance above
	the note placed before it.

	Parameters:
		unique_notes: Ascending notes with no repeated pitch class.
		root_index: Index of the note to treat as the root.

	Returns:
		Strictly ascending MIDI notes.

	Example:
		```python
		compact_candidate([48, 64, 67], 0)  # [24, 28, 31]  - C E G
		compact_candidate([48, 64, 67], 1)  # [28, 36, 43]  - E C G
		```
	"""

	stacked = [lowest_octave_note(unique_notes[root_index])]
	remaining = list(unique_notes[:root_index]) + list(unique_notes[root_index + 1:])

	for note in remaining:
		stacked.append(stacked[-1] + shortest_interval(stacked[-1], note))

	return stacked


def identify_voicing (notes: typing.Sequence[int]) -> typing.Optional[chordlens.chords.Chord]:

	"""Identify a chord from an open or doubled voicing.

	Each unique pitch class is tried as the root, lowest first. The returned
	chord is the compact stack that matched, flagged as a voicing.

	Parameters:
		notes: MIDI note numbers in any order. Any number of notes is accepted,
			as long as they reduce to three or four pitch classes.

	Returns:
		The identified ``Chord`` with ``is_voicing`` set, or ``None``.

	Example:
		```python
		identify_voicing([64, 60, 72, 67]).contains_doubled_notes  # True
		identify_voicing([64, 84, 67]).name                        # "C/E"
		```
	"""

	if len(notes) < 3:
		return None

	unique_notes = unique_pitch_classes(notes)

	for root_index in range(len(unique_notes)):

		candidate = compact_candidate(unique_notes, root_index)
		chord = chordlens.chords.identify_known_chord(candidate)

		if chord is not None:

			logger.debug(f"Voicing {sorted(notes)} resolved to {chord.name} via {candidate}")

			return dataclasses.replace(
				chord,
				is_voicing = True,
				contains_doubled_notes = len(unique_notes) < len(notes),
			)

	return None
