"""metar_decoder CLI module."""

import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import click
from rich.console import Console
from rich.pretty import Pretty
from tqdm import tqdm

from metar_decoder.errors import ParseError
from metar_decoder.export.serialize import report_to_dict
from metar_decoder.export.table import reports_to_frame
from metar_decoder.logging_setup import setup_logging
from metar_decoder.model.report import Report
from metar_decoder.parser.decoder import decode
from metar_decoder.realtime.feed import MetarFeedError, latest_report
from metar_decoder.settings import LOG_FILE, LOG_LEVEL

logger = logging.getLogger(__name__)


def _show(report: Report, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(report_to_dict(report), indent=2))
    else:
        Console().print(Pretty(report))


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=LOG_LEVEL,
    show_default=True,
    help="Logging verbosity",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=LOG_FILE,
    help="Also write logs to this rotating file",
)
def cli(log_level: str, log_file: Optional[Path]) -> None:
    """Decode METAR aviation weather reports."""
    setup_logging(log_level, str(log_file) if log_file else None)


@cli.command("decode")
@click.argument("report", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the report as JSON")
def decode_cmd(report: Tuple[str, ...], as_json: bool) -> None:  # noqa: D401
    """Decode a single REPORT (quote it, or pass its groups as separate words)."""
    text = " ".join(report)
    try:
        decoded = decode(text)
    except ParseError as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()
    _show(decoded, as_json)


@cli.command("decode-file")
@click.argument(
    "path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    required=True,
    help="Where to write the decoded table",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["csv", "json"]),
    default="csv",
    show_default=True,
    help="Output format",
)
def decode_file_cmd(path: Path, output: Path, fmt: str) -> None:
    """Decode every non-empty line of PATH and write one row per report."""
    lines = [line.strip() for line in path.read_text().splitlines() if line.strip()]
    reports: List[Report] = []
    failures = 0
    for line in tqdm(lines, desc=f"Decoding {path.name}", disable=None):
        try:
            reports.append(decode(line))
        except ParseError as e:
            failures += 1
            logger.warning("Skipping undecodable report %r: %s", line, e.args[0])

    frame = reports_to_frame(reports)
    output.parent.mkdir(parents=True, exist_ok=True)
    if fmt == "json":
        frame.to_json(output, orient="records", indent=2)
    else:
        frame.to_csv(output, index=False)
    click.echo(f"Decoded {len(reports):,} reports ({failures:,} failed) -> {output}")


@cli.command("latest")
@click.argument("icao")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the report as JSON")
def latest_cmd(icao: str, as_json: bool) -> None:  # noqa: D401
    """Fetch and decode the latest observation for station ICAO."""
    try:
        observation = latest_report(icao)
    except (MetarFeedError, ParseError) as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()
    click.echo(f"{observation.observed_at:%Y-%m-%d %H:%M}Z  {observation.raw}")
    _show(observation.report, as_json)


if __name__ == "__main__":  # pragma: no cover
    cli()
