"""Diatonic scale catalog and scale degree matching.

`find_scales` answers "which keys could this chord belong to, and on which degree?"
for six seven-note scale types. It works in two passes per scale type:

1. **Shape.** Chords are stacked in thirds, so each chord interval spans two
   consecutive scale steps. Summing step pairs over a sliding window of the
   (wrapped) step pattern gives the interval vector of each diatonic chord; the
   scale type is kept only if one of them equals the chord's root position
   interval vector.
2. **Key.** For every key root the scale's pitch classes are built and the
   chord is accepted in that key if all of its pitch classes belong to it. The
   degree is the position of the chord root within the key.

Example:
	```python
	chord = identify_chord([60, 64, 67, 71])  # C7 (major seventh)

	for degrees in find_scales(chord):
		print([(d.scale.name_with_key, d.degree, d.symbol) for d in degrees])

	# [('C Major', 1, 'I⁷'), ('G Major', 4, 'IV⁷')]
	# [('E Minor', 6, 'VI⁷'), ('A Minor', 3, 'III⁷')]
	# [('C Harmonic Major', 1, 'I⁷')]
	# [('E Harmonic Minor', 6, 'VI⁷')]
	```
"""

import dataclasses
import typing

import chordlens.chord_types
import chordlens.chords
import chordlens.intervals
import chordlens.notes


ROMAN_NUMERALS: typing.List[str] = ["I", "II", "III", "IV", "V", "VI", "VII"]


@dataclasses.dataclass(frozen=True)
class ScaleType:

	"""
	A seven-note scale as ascending semitone steps summing to an octave.
	"""

	name: str
	steps: typing.Tuple[int, ...]


SCALE_TYPES: typing.Tuple[ScaleType, ...] = (
	ScaleType("Major", (2, 2, 1, 2, 2, 2, 1)),
	ScaleType("Minor", (2, 1, 2, 2, 1, 2, 2)),
	ScaleType("Harmonic Major", (2, 2, 1, 2, 1, 3, 1)),
	ScaleType("Harmonic Minor", (2, 1, 2, 2, 1, 3, 1)),
	ScaleType("Melodic Major", (2, 2, 1, 2, 1, 2, 2)),
	ScaleType("Melodic Minor", (2, 1, 2, 2, 2, 2, 1)),
)


def get_scale_type (name: str) -> ScaleType:

	"""Return a scale type from the catalog by name.

	Raises:
		ValueError: If no scale type has this name.
	"""

	for scale_type in SCALE_TYPES:
		if scale_type.name == name:
			return scale_type

	available = ", ".join(scale_type.name for scale_type in SCALE_TYPES)
	raise ValueError(f"Unknown scale type: {name!r}. Available: {available}")


@dataclasses.dataclass(frozen=True)
class Scale:

	"""
	A scale type rooted on a key.
	"""

	scale_type: ScaleType
	key_pc: int


	@property
	def key (self) -> str:

		return chordlens.notes.PC_TO_NOTE_NAME[self.key_pc]


	@property
	def name_with_key (self) -> str:

		"""E.g. ``"A Minor"``."""

		return f"{self.key} {self.scale_type.name}"


	def pitch_classes (self) -> typing.List[int]:

		"""Return the seven pitch classes of the scale, starting on the key.

		Example:
			```python
			Scale(get_scale_type("Minor"), 9).pitch_classes()  # [9, 11, 0, 2, 4, 5, 7]
			```
		"""

		pitch_classes = [self.key_pc]

		for step in self.scale_type.steps[:-1]:
			pitch_classes.append((pitch_classes[-1] + step) % 12)

		return pitch_classes


@dataclasses.dataclass(frozen=True)
class ScaleDegree:

	"""
	A chord's position within a scale.
	"""

	scale: Scale
	degree: int
	chord_type: chordlens.chord_types.ChordType


	@property
	def name (self) -> str:

		"""E.g. ``"G Major [4]"``."""

		return f"{self.scale.name_with_key} [{self.degree}]"


	@property
	def symbol (self) -> str:

		"""Roman numeral for the degree, lower case for minor-family chords.

		Example:
			```python
			# degree 2 of a minor seventh chord
			ScaleDegree(scale, 2, get_chord_type("minor_7th")).symbol  # "ii⁷"
			```
		"""

		numeral = ROMAN_NUMERALS[self.degree - 1]

		if not self.chord_type.is_major_family:
			numeral = numeral.lower()

		return numeral + self.chord_type.symbol


def stacked_intervals (steps: typing.Sequence[int], note_count: int) -> typing.List[typing.List[int]]:

	"""Return the interval vectors of chords stacked in thirds on a step pattern.

	Windows slide along the step pattern, wrapping past the seventh step. Each
	chord interval is the sum of two consecutive steps.

	Parameters:
		steps: Scale steps (e.g. ``(2, 2, 1, 2, 2, 2, 1)``).
		note_count: Notes per chord (3 for triads, 4 for sevenths).

	Returns:
		One interval vector of length ``note_count - 1`` per window, in window order.

	Example:
		```python
		stacked_intervals((2, 2, 1, 2, 2, 2, 1), 3)[0]  # [4, 3] - the tonic triad
		```
	"""

	span = 1 + (note_count - 2) * 2
	extended = list(steps) + list(steps[:span])
	windows: typing.List[typing.List[int]] = []

	for end in range(span, len(extended)):
		windows.append([extended[j] + extended[j + 1] for j in range(end - span, end, 2)])

	return windows


def find_scales (chord: chordlens.chords.Chord) -> typing.List[typing.List[ScaleDegree]]:

	"""Find every scale, key and degree that contains a chord.

	Parameters:
		chord: An identified chord (e.g. from ``identify_chord``).

	Returns:
		One list of ``ScaleDegree`` per scale type whose diatonic chords include
		the chord's shape, in catalog order. Within a list, keys ascend from C.
		Scale types without the shape are left out entirely.
	"""

	parent_notes = chord.parent_notes()
	chord_intervals = chordlens.intervals.intervals_of(parent_notes)
	chord_pcs = [note % 12 for note in parent_notes]

	matched: typing.List[typing.List[ScaleDegree]] = []

	for scale_type in SCALE_TYPES:

		if chord_intervals not in stacked_intervals(scale_type.steps, chord.chord_type.note_count):
			continue

		degrees: typing.List[ScaleDegree] = []

		for key_pc in range(12):

			scale = Scale(scale_type, key_pc)
			scale_pcs = scale.pitch_classes()

			if all(pc in scale_pcs for pc in chord_pcs):
				degrees.append(ScaleDegree(scale, scale_pcs.index(chord_pcs[0]) + 1, chord.chord_type))

		matched.append(degrees)

	return matched
