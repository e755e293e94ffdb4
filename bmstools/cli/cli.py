"""Command Line Interface"""

from pathlib import Path
from typing import Any, Dict, Optional

import click

from bmstools.chart import ChartData
from bmstools.formats import DecodeError, FieldParseError, load_folder
from bmstools.formats.bms.symbols import encode_object
from bmstools.version import __version__

from .helpers import known_encoding, loader_option


@click.command()
@click.argument("src", type=click.Path(exists=True))
@click.option(
    "-m",
    "--measure",
    "measure",
    type=click.IntRange(min=0),
    help="Also show the objects of this measure",
)
@loader_option(
    "--encoding",
    "legacy_encoding",
    validator=known_encoding,
    help=(
        "Encoding to try before falling back to utf-8, defaults to cp932 "
        "(shift-jis)"
    ),
)
@click.version_option(__version__)
def bmstools(
    src: str,
    measure: Optional[int],
    loader_options: Optional[Dict[str, Any]] = None,
) -> None:
    """Show what's inside SRC, either a chart file or a folder of charts"""
    path = Path(src)
    loader_options = loader_options or {}
    try:
        charts = load_folder(path, **loader_options)
    except (DecodeError, FieldParseError) as e:
        raise click.ClickException(str(e))

    if path.is_dir() and not charts:
        click.echo(f"No chart found in {path}")

    for chart_path, chart in charts.items():
        if path.is_dir():
            click.echo(f"{chart_path.name} :")
        click.echo(summarize(chart))
        if measure is not None:
            click.echo(show_measure(chart, measure))


def summarize(chart: ChartData) -> str:
    lines = [
        f"title      : {chart.title}",
        f"artist     : {chart.artist}",
        f"genre      : {chart.genre}",
        f"player     : {chart.player}",
        f"play level : {chart.play_level}",
        f"bpm        : {chart.bpm:g}",
        f"sounds     : {len(chart.sound_paths)}",
        f"lines      : {len(chart.subseqs)}",
        f"measures   : {chart.count_measures()}",
    ]
    return "\n".join(lines)


def show_measure(chart: ChartData, measure: int) -> str:
    subseqs = chart.get_measure(measure)
    if not subseqs:
        return f"measure {measure} is empty"

    lines = [f"measure {measure} :"]
    for subseq in subseqs:
        symbols = " ".join(encode_object(o) for o in subseq.notes)
        lines.append(f"  {subseq.channel:>3} : {symbols}")

    return "\n".join(lines)


if __name__ == "__main__":
    bmstools()
