"""Tests for the command processor and the convert command wiring."""

from __future__ import annotations

import io
import signal
from collections.abc import Callable
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from flac2mp3.config.config import Config
from flac2mp3.ui.cli import CommandProcessor, main
from flac2mp3.ui.cli.args import ConvertArgs
from flac2mp3.ui.cli.commands import ConvertCommand


@pytest.fixture
def no_signal(mocker: MockerFixture):
    return mocker.patch("flac2mp3.ui.cli.cli.signal.signal")


def test_process_command_runs_convert(mocker: MockerFixture, no_signal) -> None:
    command_cls = mocker.patch("flac2mp3.ui.cli.cli.ConvertCommand")
    _ = mocker.patch("flac2mp3.ui.cli.args.parser.setup_logger")

    CommandProcessor.process_command([])

    command_cls.return_value.execute.assert_called_once_with()
    assert no_signal.call_args.args[0] == signal.SIGTERM


def test_keyboard_interrupt_exits_130(mocker: MockerFixture, no_signal) -> None:
    command_cls = mocker.patch("flac2mp3.ui.cli.cli.ConvertCommand")
    command_cls.return_value.execute.side_effect = KeyboardInterrupt
    _ = mocker.patch("flac2mp3.ui.cli.args.parser.setup_logger")

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command([])

    assert exc_info.value.code == 130


def test_unexpected_error_exits_internal_error(mocker: MockerFixture, no_signal) -> None:
    command_cls = mocker.patch("flac2mp3.ui.cli.cli.ConvertCommand")
    command_cls.return_value.execute.side_effect = RuntimeError("boom")
    _ = mocker.patch("flac2mp3.ui.cli.args.parser.setup_logger")

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command([])

    assert exc_info.value.code == 70


def test_main_returns_zero(mocker: MockerFixture) -> None:
    process = mocker.patch("flac2mp3.ui.cli.cli.CommandProcessor.process_command")

    assert main() == 0
    process.assert_called_once_with()


def test_convert_command_reads_stdin_and_writes_playlist(
    tmp_path: Path,
    make_flac: Callable[..., Path],
    mocker: MockerFixture,
) -> None:
    """Codec binaries are mocked out; naming and playlist output are real."""

    first = make_flac(name="one.flac", tags={"ARTIST": "A", "ALBUM": "B", "TITLE": "One", "TRACKNUMBER": "1"})
    second = make_flac(name="two.flac", tags={"ARTIST": "A", "ALBUM": "B", "TITLE": "Two", "TRACKNUMBER": "2"})
    run_codec = mocker.patch("flac2mp3.platform.codecs.run_codec")
    output_root = tmp_path / "out"
    output_root.mkdir()
    args = ConvertArgs(playlist=None, verbose=False, quiet=False, config=Config(scratch_prefix="t-"))
    stdin = io.BytesIO(bytes(first) + b"\0" + bytes(second) + b"\0")

    summary = ConvertCommand(args, output_root=output_root).execute(stdin)

    assert summary.converted == 2
    assert run_codec.call_count == 4
    assert (output_root / "playlist.m3u").read_text(encoding="utf-8").splitlines() == [
        "a/b/001_one.mp3",
        "a/b/002_two.mp3",
    ]


def test_convert_command_prefers_playlist_sources(tmp_path: Path) -> None:
    playlist = tmp_path / "list.m3u"
    _ = playlist.write_text("#EXTM3U\n/music/a.flac\n/music/b.mp3\n", encoding="utf-8")
    args = ConvertArgs(playlist=playlist, verbose=False, quiet=False)

    command = ConvertCommand(args, output_root=tmp_path)

    assert list(command.sources(io.BytesIO(b"ignored.flac\0"))) == [Path("/music/a.flac")]


def test_malformed_config_exits_internal_error(isolated_config: Path, no_signal) -> None:
    _ = isolated_config.write_text("vbr_quality = = 1\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command([])

    assert exc_info.value.code == 70
