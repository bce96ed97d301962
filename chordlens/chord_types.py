"""Chord type catalog.

Each chord type is described by the ascending semitone gaps of its root
position (e.g. ``(4, 3)`` for a major triad), a symbol appended to roman
numerals in scale degree labels, a notation suffix appended to the root name in
chord names, and a major-family flag that decides the case of the roman numeral.

Declaration order matters: when an interval vector fits more than one chord type
at the same inversion, the type declared first wins.

Module-level constants:
- `TRIADS`: The six three-note chord types.
- `SEVENTHS`: The nine four-note chord types.
- `CHORD_TYPES`: Both, triads first.
"""

import dataclasses
import typing


@dataclasses.dataclass(frozen=True)
class ChordType:

	"""
	A chord shape in root position plus its display metadata.
	"""

	id: str
	intervals: typing.Tuple[int, ...]
	symbol: str
	notation: str
	is_major_family: bool


	@property
	def note_count (self) -> int:

		"""Number of notes in a chord of this type."""

		return len(self.intervals) + 1


TRIADS: typing.Tuple[ChordType, ...] = (
	ChordType("minor", (3, 4), symbol="", notation="m", is_major_family=False),
	ChordType("major", (4, 3), symbol="", notation="", is_major_family=True),
	ChordType("diminished", (3, 3), symbol="°", notation="dim", is_major_family=False),
	ChordType("augmented", (4, 4), symbol="⁺", notation="aug", is_major_family=True),
	ChordType("sus2", (2, 5), symbol="sus2", notation="sus2", is_major_family=True),
	ChordType("sus4", (5, 2), symbol="sus4", notation="sus4", is_major_family=True),
)

SEVENTHS: typing.Tuple[ChordType, ...] = (
	ChordType("major_7th", (4, 3, 4), symbol="⁷", notation="7", is_major_family=True),
	ChordType("minor_7th", (3, 4, 3), symbol="⁷", notation="m7", is_major_family=False),
	ChordType("dominant_7th", (4, 3, 3), symbol="⁷", notation="dom7", is_major_family=True),
	ChordType("half_diminished_7th", (3, 3, 4), symbol="ø⁷", notation="m7b5", is_major_family=False),
	ChordType("diminished_7th", (3, 3, 3), symbol="°⁷", notation="dim7", is_major_family=False),
	ChordType("minor_major_7th", (3, 4, 4), symbol="ᴹ⁷", notation="mM7", is_major_family=False),
	ChordType("augmented_7th", (4, 4, 3), symbol="⁺⁷", notation="7#5", is_major_family=True),
	ChordType("7sus2", (2, 5, 3), symbol="⁷sus2", notation="7sus2", is_major_family=True),
	ChordType("7sus4", (5, 2, 3), symbol="⁷sus4", notation="7sus4", is_major_family=True),
)

CHORD_TYPES: typing.Tuple[ChordType, ...] = TRIADS + SEVENTHS


def get_chord_type (chord_type_id: str) -> ChordType:

	"""Return a chord type from the catalog by its id.

	Raises:
		ValueError: If no chord type has this id.

	Example:
		```python
		get_chord_type("minor").notation   # "m"
		get_chord_type("major_7th").intervals  # (4, 3, 4)
		```
	"""

	for chord_type in CHORD_TYPES:
		if chord_type.id == chord_type_id:
			return chord_type

	available = ", ".join(chord_type.id for chord_type in CHORD_TYPES)
	raise ValueError(f"Unknown chord type: {chord_type_id!r}. Available: {available}")
