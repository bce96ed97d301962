"""Interval vectors and their rotation.

An interval vector lists the semitone gaps between consecutive notes of an
ascending chord, e.g. ``[4, 3]`` for a C major triad ``[60, 64, 67]``. The gap
that closes the octave back to the bottom note is implicit: ``12 - sum``.

Rotating a vector moves that closing gap into the vector and drops the first
gap, which is exactly what happens to the intervals when the bottom note of a
chord is raised by an octave (an inversion). The same operator drives chord
inversion matching and scale matching.

Example:
	```python
	intervals_of([60, 64, 67])        # [4, 3]
	rotate_interval_vector([4, 3])    # [3, 5]  - first inversion
	interval_rotations([4, 3])        # [[3, 5], [5, 4]]
	```
"""

import typing


def intervals_of (sorted_notes: typing.Sequence[int]) -> typing.List[int]:

	"""
	Return the gaps between adjacent notes of an ascending note list.
	"""

	return [upper - lower for lower, upper in zip(sorted_notes[:-1], sorted_notes[1:])]


def rotate_interval_vector (intervals: typing.Sequence[int]) -> typing.List[int]:

	"""Rotate an interval vector by one inversion.

	Drops the first interval and appends the interval that completes the
	octave. Applying this ``len(intervals) + 1`` times returns the original
	vector.

	Parameters:
		intervals: Ascending semitone gaps, summing to less than 12.

	Returns:
		New interval list of the same length.

	Example:
		```python
		rotate_interval_vector([3, 3, 5])  # [3, 5, 1]
		rotate_interval_vector([3, 5, 1])  # [5, 1, 3]
		rotate_interval_vector([5, 1, 3])  # [1, 3, 3]
		rotate_interval_vector([1, 3, 3])  # [3, 3, 5]
		```
	"""

	if not intervals:
		return []

	return list(intervals[1:]) + [12 - sum(intervals)]


def interval_rotations (intervals: typing.Sequence[int]) -> typing.List[typing.List[int]]:

	"""Return every non-trivial rotation of an interval vector.

	The list holds ``len(intervals)`` entries: entry ``i`` (0-indexed) is the
	vector rotated ``i + 1`` times, i.e. the intervals of inversion ``i + 1``.
	"""

	rotations: typing.List[typing.List[int]] = []
	current = list(intervals)

	for _ in range(len(intervals)):
		current = rotate_interval_vector(current)
		rotations.append(current)

	return rotations
