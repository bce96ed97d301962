"""MIDI note resolution.

Maps MIDI note numbers to pitch class names and octaves. Convention: **C4 = 60**
(Middle C), matching the MIDI Manufacturers Association standard and most DAWs.

Notes below MIDI 12 (octave -1) are not resolvable: ``resolve_note`` returns
``None`` for them. ``note_name`` still names their pitch class, since chord
naming only needs the pitch class.
"""

import dataclasses
import typing


PC_TO_NOTE_NAME: typing.List[str] = [
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
]

LOWEST_RESOLVABLE_NOTE = 12


@dataclasses.dataclass(frozen=True)
class Note:

	"""
	A single resolved MIDI note.
	"""

	number: int
	name: str
	pitch_class: int
	octave: int


	@property
	def name_with_octave (self) -> str:

		"""Note name followed by its octave, e.g. ``"C#4"``."""

		return f"{self.name}{self.octave}"


	@property
	def is_sharp (self) -> bool:

		"""True for the five black-key pitch classes."""

		return "#" in self.name


def note_name (number: int) -> str:

	"""
	Return the pitch class name of any MIDI note number.
	"""

	return PC_TO_NOTE_NAME[number % 12]


def resolve_note (number: int) -> typing.Optional[Note]:

	"""Resolve a MIDI note number to its name, pitch class and octave.

	Parameters:
		number: MIDI note number (e.g. 60 = middle C).

	Returns:
		A ``Note``, or ``None`` when the note lies below octave 0 (MIDI 0–11).

	Example:
		```python
		resolve_note(60)   # Note(number=60, name="C", pitch_class=0, octave=4)
		resolve_note(21)   # Note(number=21, name="A", pitch_class=9, octave=0)
		resolve_note(11)   # None
		```
	"""

	octave = number // 12 - 1

	if octave < 0:
		return None

	pitch_class = number % 12

	return Note(number=number, name=PC_TO_NOTE_NAME[pitch_class], pitch_class=pitch_class, octave=octave)
