from pathlib import Path

from click.testing import CliRunner

from ..cli import bmstools

CHART = "\n".join(
    [
        "#PLAYER 1",
        "#GENRE UK HARDCORE",
        "#TITLE B.B.K.K.B.K.K. (NORMAL)",
        "#ARTIST nora2r",
        "#BPM 170.0",
        "#PLAYLEVEL 3",
        "#WAV01 bbkkbkk_01.wav",
        "#00111:0101010001",
        "#00211:0A",
        "#00111:ZZ",
    ]
)


def test_that_a_summary_is_shown() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        Path("chart.bms").write_text(CHART, encoding="cp932")
        result = runner.invoke(bmstools, ["chart.bms"])
        if result.exception:
            raise result.exception
        assert result.exit_code == 0
        assert "title      : B.B.K.K.B.K.K. (NORMAL)" in result.output
        assert "bpm        : 170" in result.output
        assert "lines      : 3" in result.output
        assert "measures   : 3" in result.output


def test_that_a_measure_can_be_shown() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        Path("chart.bms").write_text(CHART, encoding="cp932")
        result = runner.invoke(bmstools, ["chart.bms", "--measure", "1"])
        assert result.exit_code == 0
        assert "   11 : 01 01 01 00 01" in result.output
        assert "   11 : ZZ" in result.output

        result = runner.invoke(bmstools, ["chart.bms", "-m", "5"])
        assert result.exit_code == 0
        assert "measure 5 is empty" in result.output


def test_that_folders_are_summarized_file_by_file() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        Path("song").mkdir()
        Path("song/normal.bms").write_text(CHART, encoding="cp932")
        Path("song/hyper.bme").write_text(CHART, encoding="cp932")
        result = runner.invoke(bmstools, ["song"])
        assert result.exit_code == 0
        assert "normal.bms :" in result.output
        assert "hyper.bme :" in result.output


def test_that_parsing_errors_are_reported() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        Path("chart.bms").write_text("#BPM fast\n", encoding="cp932")
        result = runner.invoke(bmstools, ["chart.bms"])
        assert result.exit_code == 1
        assert "Invalid #BPM command" in result.output


def test_that_the_encoding_option_is_only_passed_when_given() -> None:
    without_option = bmstools.make_context("bmstools", ["."])
    assert "loader_options" not in without_option.params

    with_option = bmstools.make_context("bmstools", [".", "--encoding", "euc-kr"])
    assert with_option.params["loader_options"] == {"legacy_encoding": "euc-kr"}


def test_that_unknown_encodings_are_rejected() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        Path("chart.bms").write_text(CHART, encoding="cp932")
        result = runner.invoke(bmstools, ["chart.bms", "--encoding", "nope"])
        assert result.exit_code == 2
        assert "Unknown encoding" in result.output
