import chordlens.notes


def test_resolves_natural_note () -> None:

	"""Middle C is C4, pitch class 0."""

	note = chordlens.notes.resolve_note(60)

	assert note is not None
	assert note.number == 60
	assert note.name == "C"
	assert note.octave == 4
	assert note.pitch_class == 0


def test_resolves_sharp_note () -> None:

	"""61 is C#4 and is flagged as a sharp."""

	note = chordlens.notes.resolve_note(61)

	assert note is not None
	assert note.name == "C#"
	assert note.octave == 4
	assert note.pitch_class == 1
	assert note.is_sharp is True


def test_below_octave_zero_is_not_found () -> None:

	"""MIDI 0-11 sit in octave -1 and do not resolve."""

	assert chordlens.notes.resolve_note(11) is None
	assert chordlens.notes.resolve_note(0) is None


def test_lowest_piano_key () -> None:

	"""A0 (21) is the lowest key on a standard piano."""

	note = chordlens.notes.resolve_note(21)

	assert note is not None
	assert note.name == "A"
	assert note.octave == 0
	assert note.pitch_class == 9
	assert note.name_with_octave == "A0"


def test_highest_midi_note () -> None:

	"""127 is G9."""

	note = chordlens.notes.resolve_note(127)

	assert note is not None
	assert note.name == "G"
	assert note.octave == 9
	assert note.pitch_class == 7
	assert note.is_sharp is False


def test_note_name_ignores_octave () -> None:

	"""note_name works for any MIDI number, including octave -1."""

	assert chordlens.notes.note_name(4) == "E"
	assert chordlens.notes.note_name(64) == "E"
	assert chordlens.notes.note_name(70) == "A#"
