import argparse
import logging
import os
import sys
import typing

import yaml

import chordlens.chords
import chordlens.midi_file
import chordlens.scales


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = 'chordlens.yaml'

DEFAULT_CONFIG: typing.Dict[str, typing.Any] = {
	'log_level': 'WARNING',
	'show_scales': True,
}


def load_config (config_path: typing.Optional[str] = None) -> dict:

	"""Load configuration from a YAML file, falling back to defaults.

	Without ``config_path`` the default ``chordlens.yaml`` is read if it
	exists. A missing file is only worth a warning when it was asked for.
	Unreadable files, a top level that is not a mapping and unknown log
	levels are logged and replaced by the defaults.
	"""

	config = dict(DEFAULT_CONFIG)
	path = config_path or DEFAULT_CONFIG_PATH

	if not os.path.exists(path):
		if config_path is not None:
			logger.warning(f"Config file {path} not found. Using defaults.")
		return config

	try:
		with open(path, 'r') as f:
			loaded = yaml.safe_load(f)
	except (OSError, yaml.YAMLError) as exc:
		logger.warning(f"Config file {path} could not be read ({exc}). Using defaults.")
		return config

	if loaded is None:
		return config

	if not isinstance(loaded, dict):
		logger.warning(f"Config file {path} must contain a mapping, got {type(loaded).__name__}. Using defaults.")
		return config

	config.update(loaded)

	if not isinstance(logging.getLevelName(str(config['log_level']).upper()), int):
		logger.warning(f"Unknown log_level {config['log_level']!r} in {path}. Using {DEFAULT_CONFIG['log_level']}.")
		config['log_level'] = DEFAULT_CONFIG['log_level']

	return config


def build_parser () -> argparse.ArgumentParser:

	parser = argparse.ArgumentParser(prog="chordlens", description="Identify chords and the scales they belong to.")
	parser.add_argument("notes", nargs="*", type=int, help="MIDI note numbers, e.g. 60 64 67")
	parser.add_argument("--midi-file", help="Scan a standard MIDI file for chord changes instead")
	parser.add_argument("--config", help="YAML config file (default: chordlens.yaml, if present)")
	parser.add_argument("--no-scales", action="store_true", help="Do not list matching scales")

	return parser


def parse_args (argv: typing.Optional[typing.Sequence[str]] = None) -> argparse.Namespace:

	"""
	Parse the command line. Notes and ``--midi-file`` cannot be combined.
	"""

	parser = build_parser()
	args = parser.parse_args(argv)

	if args.midi_file and args.notes:
		parser.error("give either MIDI note numbers or --midi-file, not both")

	return args


def describe_chord (chord: chordlens.chords.Chord, show_scales: bool) -> typing.List[str]:

	"""
	Return the text lines printed for one chord.
	"""

	details = [chord.chord_type.id]

	if chord.is_inverted:
		details.append(f"inversion {chord.inversion_number}")

	if chord.is_voicing:
		details.append("voicing")

	if chord.contains_doubled_notes:
		details.append("doubled")

	lines = [f"{chord.name} ({', '.join(details)})"]

	if show_scales:
		for degrees in chordlens.scales.find_scales(chord):
			for degree in degrees:
				lines.append(f"  {degree.symbol:<8} {degree.name}")

	return lines


def main (argv: typing.Optional[typing.Sequence[str]] = None) -> int:

	"""
	Command line entry point. Returns the process exit status.
	"""

	args = parse_args(argv)
	config = load_config(args.config)

	logging.basicConfig(level=str(config['log_level']).upper())

	show_scales = bool(config['show_scales']) and not args.no_scales

	if args.midi_file:

		try:
			events = chordlens.midi_file.chords_in_midi_file(args.midi_file)
		except (OSError, EOFError, ValueError) as exc:
			logger.error(f"Could not read MIDI file {args.midi_file}: {exc}")
			return 2

		for event in events:
			print(f"{event.time:8.2f}s  {describe_chord(event.chord, show_scales=False)[0]}")

		return 0 if events else 1

	try:
		chord = chordlens.chords.identify_chord(args.notes)
	except chordlens.chords.InvalidChordInput as exc:
		logger.error(str(exc))
		return 2

	if chord is None:
		print(f"No chord found for {sorted(args.notes)}")
		return 1

	print("\n".join(describe_chord(chord, show_scales)))

	return 0


def cli () -> None:

	"""
	Console script wrapper around main().
	"""

	sys.exit(main())


if __name__ == "__main__":
	cli()
