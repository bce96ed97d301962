"""Chord identification from MIDI notes.

This module provides the `Chord` class and the close-position matcher. Every
chord type in `chordlens.chord_types` is expanded once, at import, into a table
of interval vectors covering the root position and every inversion. A note set
is identified by sorting it, taking its interval vector and scanning that table.

Table order fixes the precedence between ambiguous matches: root position
readings come before first inversions, first before second, and so on; within
the same inversion the chord type declared first in the catalog wins. For
example ``[60, 62, 67]`` is both C sus2 and the first inversion of G sus4 and
is reported as ``"Csus2"``.

Module-level helpers:
- `identify_chord(notes)`: Public entry point. Validates the input, tries a
  close-position match and falls back to `chordlens.voicings.identify_voicing`.
- `identify_known_chord(notes)`: Close-position match only. Returns ``None``
  for anything that is not three or four notes.
"""

import dataclasses
import logging
import typing

import chordlens.chord_types
import chordlens.intervals
import chordlens.notes


logger = logging.getLogger(__name__)


class InvalidChordInput (ValueError):

	"""
	Raised when a note list cannot be a chord: wrong size or not MIDI notes.
	"""


@dataclasses.dataclass(frozen=True)
class ChordShape:

	"""
	One row of the shape table: an interval vector and how to read it.
	"""

	intervals: typing.Tuple[int, ...]
	chord_type: chordlens.chord_types.ChordType
	root_index: int
	inversion: int
	declaration_index: int


@dataclasses.dataclass(frozen=True)
class Chord:

	"""
	An identified chord.

	``notes`` holds the sorted MIDI notes that were matched and ``root_index``
	points at the chord root within them. For voicings the notes are the
	compact candidate that matched, not the notes originally played.
	"""

	name: str
	notes: typing.Tuple[int, ...]
	root_index: int
	chord_type: chordlens.chord_types.ChordType
	is_voicing: bool = False
	contains_doubled_notes: bool = False


	def __post_init__ (self) -> None:

		if not 0 <= self.root_index < len(self.notes):
			raise ValueError(f"Root index {self.root_index} is outside notes {list(self.notes)}")


	@property
	def is_inverted (self) -> bool:

		"""True when the lowest note is not the root."""

		return self.root_index > 0


	@property
	def inversion_number (self) -> int:

		"""0 for root position, 1 for first inversion, and so on."""

		if not self.is_inverted:
			return 0

		return len(self.notes) - self.root_index


	@property
	def note_count (self) -> int:

		return len(self.notes)


	@property
	def root_note (self) -> int:

		"""MIDI number of the root."""

		return self.notes[self.root_index]


	@property
	def bass_note (self) -> int:

		"""MIDI number of the lowest note."""

		return self.notes[0]


	@property
	def root_name (self) -> str:

		return chordlens.notes.note_name(self.root_note)


	@property
	def bass_name (self) -> str:

		return chordlens.notes.note_name(self.bass_note)


	def parent_notes (self) -> typing.List[int]:

		"""Return the notes rearranged into close root position.

		The notes wrapped above the root by the inversion (the last
		``inversion_number`` of them) are moved down an octave.

		Example:
			```python
			chord = identify_chord([64, 67, 72])  # C/E
			chord.parent_notes()                  # [60, 64, 67]
			```
		"""

		count = len(self.notes)
		inversion = self.inversion_number

		return sorted(
			note - 12 if count - i <= inversion else note
			for i, note in enumerate(self.notes)
		)


def _build_shape_table (chord_types: typing.Sequence[chordlens.chord_types.ChordType]) -> typing.List[ChordShape]:

	"""Expand chord types into root position and inversion shapes.

	Inversion ``i`` of a chord with ``k`` intervals has its root at index
	``k + 1 - i`` of the sorted notes.
	"""

	shapes: typing.List[ChordShape] = []

	for declaration_index, chord_type in enumerate(chord_types):

		shapes.append(ChordShape(chord_type.intervals, chord_type, 0, 0, declaration_index))

		k = len(chord_type.intervals)
		rotations = chordlens.intervals.interval_rotations(chord_type.intervals)

		for inversion, rotated in enumerate(rotations, start=1):
			shapes.append(ChordShape(tuple(rotated), chord_type, k + 1 - inversion, inversion, declaration_index))

	shapes.sort(key=lambda shape: (shape.inversion, shape.declaration_index))

	return shapes


CHORD_SHAPES: typing.List[ChordShape] = _build_shape_table(chordlens.chord_types.CHORD_TYPES)


def chord_name (sorted_notes: typing.Sequence[int], root_index: int, chord_type: chordlens.chord_types.ChordType) -> str:

	"""Format a chord name such as ``"Cm"`` or ``"C/E"``.

	The bass note is appended after a slash only when it differs from the root.
	"""

	root_name = chordlens.notes.note_name(sorted_notes[root_index])
	bass_name = chordlens.notes.note_name(sorted_notes[0])

	name = root_name + chord_type.notation

	if bass_name != root_name:
		name += "/" + bass_name

	return name


def identify_known_chord (notes: typing.Iterable[int]) -> typing.Optional[Chord]:

	"""Identify a chord played in close position.

	Parameters:
		notes: MIDI note numbers in any order.

	Returns:
		The matching ``Chord``, or ``None`` if the notes are not three or four
		notes forming a known shape or one of its inversions.

	Example:
		```python
		identify_known_chord([64, 60, 67]).name  # "C"
		identify_known_chord([72, 64, 67]).name  # "C/E"
		identify_known_chord([64, 48, 67])       # None - open voicing
		```
	"""

	sorted_notes = tuple(sorted(notes))

	if len(sorted_notes) not in (3, 4):
		return None

	intervals = tuple(chordlens.intervals.intervals_of(sorted_notes))

	for shape in CHORD_SHAPES:

		if shape.intervals == intervals:

			return Chord(
				name = chord_name(sorted_notes, shape.root_index, shape.chord_type),
				notes = sorted_notes,
				root_index = shape.root_index,
				chord_type = shape.chord_type,
			)

	logger.debug(f"No chord shape matches intervals {list(intervals)}")

	return None


def validate_notes (notes: typing.Sequence[int]) -> None:

	"""Check that every entry is an integer MIDI note number (0-127).

	Raises:
		InvalidChordInput: On the first entry that is not.
	"""

	for note in notes:
		if isinstance(note, bool) or not isinstance(note, int) or not 0 <= note <= 127:
			raise InvalidChordInput(f"Not a MIDI note number: {note!r}. Expected an integer 0-127.")


def identify_chord (notes: typing.Sequence[int]) -> typing.Optional[Chord]:

	"""Identify a chord from three or four MIDI notes.

	Close-position chords and their inversions are matched directly. Failing
	that, the notes are treated as a voicing (spread over several octaves, or
	with a pitch class doubled) and resolved back to a close-position shape.

	Parameters:
		notes: Three or four MIDI note numbers in any order.

	Returns:
		The identified ``Chord``, or ``None`` if no known chord matches.

	Raises:
		InvalidChordInput: If there are not exactly three or four notes, or an
			entry is not a MIDI note number.

	Example:
		```python
		identify_chord([64, 60, 67]).name        # "C"
		identify_chord([63, 60, 67]).name        # "Cm"
		identify_chord([72, 76, 67]).name        # "C/G"
		identify_chord([64, 60, 67, 71]).name    # "C7"

		chord = identify_chord([64, 60, 72, 67])
		chord.is_voicing, chord.contains_doubled_notes  # (True, True)

		identify_chord([60, 61, 62])             # None
		```
	"""

	notes = list(notes)

	if len(notes) not in (3, 4):
		raise InvalidChordInput(f"A chord needs 3 or 4 notes, got {len(notes)}: {notes}")

	validate_notes(notes)

	chord = identify_known_chord(notes)

	if chord is None:

		# Import here to avoid circular import at module level.
		import chordlens.voicings

		chord = chordlens.voicings.identify_voicing(notes)

	return chord
