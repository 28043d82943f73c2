"""CLI entry point for scenario-split.

    scenario-split render <record.yaml> [options]
    scenario-split validate <record.yaml>
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .record.parser import parse_record
from .record.schema import ScenarioRecord
from .record.validator import validate_record
from .render.feature_renderer import (
    LINE_SEPARATORS,
    TOOL_NAME,
    FeatureRenderer,
    RenderConfig,
)
from .reporting.json_reporter import JsonReporter, error_output

LOGGER = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """Render single-scenario feature files from extracted scenario records."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@main.command()
@click.argument("record_file", type=click.Path(path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), help="Write the feature file here instead of stdout.")
@click.option("--tool-name", default=TOOL_NAME, show_default=True, help="Name shown in the generation comment.")
@click.option(
    "--line-separator",
    type=click.Choice(sorted(LINE_SEPARATORS), case_sensitive=False),
    default="native",
    show_default=True,
)
@click.option("--timestamp", type=click.DateTime(), help="Fixed generation time (default: now).")
@click.option("--timestamp-format", help="strftime pattern for the generation time (default: ISO 8601).")
@click.option("--json", "as_json", is_flag=True, help="Print flow JSON output instead of the feature text.")
def render(
    record_file: Path,
    output: Optional[Path],
    tool_name: str,
    line_separator: str,
    timestamp: Optional[datetime],
    timestamp_format: Optional[str],
    as_json: bool,
):
    """Render RECORD_FILE as a single-scenario feature file."""
    record = _load_record(record_file, "render")

    reporter = JsonReporter()
    validation = validate_record(record)
    LOGGER.info("%s: %s", record_file, validation)
    for warning in validation.warnings:
        LOGGER.warning("%s: %s", warning.path, warning.message)

    if not validation.valid:
        report = reporter.generate(record, validation=validation)
        _echo_json(reporter.generate_flow_output(report, "render"))
        sys.exit(1)

    config = RenderConfig.from_dict({
        "tool_name": tool_name,
        "line_separator": line_separator,
        "timestamp_format": timestamp_format,
    })
    text = FeatureRenderer(config).render(record, timestamp or datetime.now().astimezone())

    if output:
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            with open(output, "w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as e:
            LOGGER.debug("Failed to write %s", output, exc_info=True)
            _echo_json(error_output("render", f"Failed to write {output}: {e}"))
            sys.exit(1)
        LOGGER.info("Wrote %s", output)

    if as_json:
        report = reporter.generate(
            record,
            text=text,
            output_path=str(output) if output else None,
            validation=validation,
        )
        _echo_json(reporter.generate_flow_output(report, "render"))
    elif output:
        click.echo(f"Wrote {output}")
    else:
        # Separators are already applied; bypass text-mode newline translation.
        stdout = click.get_binary_stream("stdout")
        stdout.write(text.encode("utf-8"))
        stdout.flush()


@main.command()
@click.argument("record_file", type=click.Path(path_type=Path))
def validate(record_file: Path):
    """Validate RECORD_FILE and print the findings as flow JSON."""
    record = _load_record(record_file, "validate")

    reporter = JsonReporter()
    validation = validate_record(record)
    report = reporter.generate(record, validation=validation)
    _echo_json(reporter.generate_flow_output(report, "validate"))

    if not validation.valid:
        sys.exit(1)


def _load_record(record_file: Path, command: str) -> ScenarioRecord:
    """Load a record, exiting with a flow error on failure."""
    try:
        return parse_record(record_file)
    except (OSError, ValueError) as e:
        LOGGER.debug("Failed to load %s", record_file, exc_info=True)
        _echo_json(error_output(command, f"Failed to load record: {e}"))
        sys.exit(1)


def _echo_json(output: dict) -> None:
    click.echo(JsonReporter().to_json_string(output, pretty=False))


if __name__ == "__main__":
    main()
