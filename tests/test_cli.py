import pathlib

import pytest

import chordlens.__main__


def test_identifies_chord_with_scales (capsys, tmp_path: pathlib.Path, monkeypatch) -> None:

	"""Notes on the command line print the chord and its scale degrees."""

	monkeypatch.chdir(tmp_path)

	status = chordlens.__main__.main(["64", "60", "67"])
	output = capsys.readouterr().out.splitlines()

	assert status == 0
	assert output[0] == "C (major)"
	assert any("C Major [1]" in line and line.strip().startswith("I ") for line in output[1:])


def test_inverted_voicing_details (capsys, tmp_path: pathlib.Path, monkeypatch) -> None:

	"""Inversion and voicing flags are listed after the chord type."""

	monkeypatch.chdir(tmp_path)

	status = chordlens.__main__.main(["64", "84", "67", "--no-scales"])
	output = capsys.readouterr().out.splitlines()

	assert status == 0
	assert output == ["C/E (major, inversion 1, voicing)"]


def test_no_chord_found (capsys, tmp_path: pathlib.Path, monkeypatch) -> None:

	"""Unrecognised notes exit with status 1."""

	monkeypatch.chdir(tmp_path)

	status = chordlens.__main__.main(["60", "61", "62"])

	assert status == 1
	assert "No chord found" in capsys.readouterr().out


def test_invalid_input (tmp_path: pathlib.Path, monkeypatch) -> None:

	"""Two notes are invalid input, exit status 2."""

	monkeypatch.chdir(tmp_path)

	assert chordlens.__main__.main(["60", "64"]) == 2


def test_config_file_disables_scales (capsys, tmp_path: pathlib.Path) -> None:

	"""show_scales: false in the YAML config prints only the chord line."""

	config_path = tmp_path / "custom.yaml"
	config_path.write_text("show_scales: false\nlog_level: error\n")

	status = chordlens.__main__.main(["63", "60", "67", "--config", str(config_path)])

	assert status == 0
	assert capsys.readouterr().out.splitlines() == ["Cm (minor)"]


def test_load_config_defaults_for_missing_file (tmp_path: pathlib.Path) -> None:

	"""A missing config file yields the defaults."""

	config = chordlens.__main__.load_config(str(tmp_path / "missing.yaml"))

	assert config == chordlens.__main__.DEFAULT_CONFIG


def test_load_config_merges_values (tmp_path: pathlib.Path) -> None:

	"""Keys in the file override defaults, others are kept."""

	config_path = tmp_path / "chordlens.yaml"
	config_path.write_text("log_level: debug\n")

	config = chordlens.__main__.load_config(str(config_path))

	assert config['log_level'] == "debug"
	assert config['show_scales'] is True


def test_midi_file_option (capsys, write_midi_file, tmp_path: pathlib.Path, monkeypatch) -> None:

	"""--midi-file prints one timed line per chord change."""

	monkeypatch.chdir(tmp_path)

	path = write_midi_file([
		(0, 'note_on', 57),
		(0, 'note_on', 60),
		(0, 'note_on', 64),
		(480, 'note_off', 57),
		(0, 'note_off', 60),
		(0, 'note_off', 64),
	])

	status = chordlens.__main__.main(["--midi-file", str(path)])
	output = capsys.readouterr().out.splitlines()

	assert status == 0
	assert output == ["    0.00s  Am (minor)"]


def test_missing_midi_file (tmp_path: pathlib.Path, monkeypatch, caplog) -> None:

	"""A MIDI path that does not exist is reported and exits with status 2."""

	monkeypatch.chdir(tmp_path)

	status = chordlens.__main__.main(["--midi-file", str(tmp_path / "missing.mid")])

	assert status == 2
	assert "Could not read MIDI file" in caplog.text


def test_corrupt_midi_file (tmp_path: pathlib.Path, monkeypatch, caplog) -> None:

	"""A file that is not MIDI is reported and exits with status 2."""

	monkeypatch.chdir(tmp_path)

	path = tmp_path / "garbage.mid"
	path.write_text("garbage")

	status = chordlens.__main__.main(["--midi-file", str(path)])

	assert status == 2
	assert "Could not read MIDI file" in caplog.text


def test_notes_and_midi_file_are_exclusive (tmp_path: pathlib.Path, monkeypatch) -> None:

	"""Notes given together with --midi-file are rejected by the parser."""

	monkeypatch.chdir(tmp_path)

	with pytest.raises(SystemExit) as excinfo:
		chordlens.__main__.main(["60", "64", "67", "--midi-file", "song.mid"])

	assert excinfo.value.code == 2


def test_unknown_log_level_falls_back (tmp_path: pathlib.Path) -> None:

	"""An unknown log level is replaced by the default."""

	config_path = tmp_path / "chordlens.yaml"
	config_path.write_text("log_level: verbose\nshow_scales: false\n")

	config = chordlens.__main__.load_config(str(config_path))

	assert config['log_level'] == chordlens.__main__.DEFAULT_CONFIG['log_level']
	assert config['show_scales'] is False


def test_non_mapping_config_falls_back (tmp_path: pathlib.Path, capsys) -> None:

	"""A config file holding a list is ignored in favour of the defaults."""

	config_path = tmp_path / "list.yaml"
	config_path.write_text("- show_scales\n- log_level\n")

	assert chordlens.__main__.load_config(str(config_path)) == chordlens.__main__.DEFAULT_CONFIG

	status = chordlens.__main__.main(["64", "60", "67", "--config", str(config_path)])

	assert status == 0
	assert capsys.readouterr().out.splitlines()[0] == "C (major)"


def test_default_config_missing_is_silent (tmp_path: pathlib.Path, monkeypatch, caplog) -> None:

	"""Without --config, an absent chordlens.yaml produces no warning."""

	monkeypatch.chdir(tmp_path)

	config = chordlens.__main__.load_config()

	assert config == chordlens.__main__.DEFAULT_CONFIG
	assert "not found" not in caplog.text


def test_explicit_config_missing_warns (tmp_path: pathlib.Path, caplog) -> None:

	"""An explicitly requested config file that is absent is warned about."""

	chordlens.__main__.load_config(str(tmp_path / "absent.yaml"))

	assert "not found" in caplog.text
