"""
chordlens - chord and scale identification from MIDI notes.

Give it the notes being played, in any order and any octave, and it tells you
which chord they form, which note is the root, whether the chord is inverted,
and every diatonic scale and key the chord fits, with its roman numeral degree.
It is meant for interactive tools (keyboards, theory trainers, composition
aids) that need harmonic analysis of arbitrary note input as it happens.

What it recognises:

- **Triads.** Major, minor, diminished, augmented, sus2 and sus4.
- **Seventh chords.** Major, minor, dominant, half-diminished, diminished,
  minor-major, augmented, 7sus2 and 7sus4.
- **Inversions.** Every inversion of every shape, with the bass note shown
  after a slash (``"C/E"``). Root position readings win over inverted ones.
- **Voicings.** Open spacings (``[48, 64, 67]``) and doubled notes
  (``[60, 64, 67, 72]``) are reduced to a close-position chord.
- **Scales.** Major, minor, harmonic major, harmonic minor, melodic major and
  melodic minor, in all twelve keys.

Minimal example:

    ```python
    import chordlens

    chord = chordlens.identify_chord([64, 60, 67, 71])
    chord.name                      # "C7"

    for degrees in chordlens.find_scales(chord):
        for degree in degrees:
            print(degree.name, degree.symbol)   # "C Major [1] I⁷", ...
    ```

Absence is not an error: ``identify_chord`` returns ``None`` when nothing
matches and ``resolve_note`` returns ``None`` below MIDI 12. Input that can
never be a chord (not three or four notes) raises ``InvalidChordInput``.

Package-level exports: ``resolve_note``, ``identify_chord``, ``find_scales``,
``rotate_interval_vector``, ``chords_in_midi_file``, ``InvalidChordInput``.
"""

import chordlens.chords
import chordlens.intervals
import chordlens.midi_file
import chordlens.notes
import chordlens.scales


resolve_note = chordlens.notes.resolve_note
identify_chord = chordlens.chords.identify_chord
find_scales = chordlens.scales.find_scales
rotate_interval_vector = chordlens.intervals.rotate_interval_vector
chords_in_midi_file = chordlens.midi_file.chords_in_midi_file
InvalidChordInput = chordlens.chords.InvalidChordInput
