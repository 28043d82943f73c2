"""Feature file renderer.

Turns a ScenarioRecord back into a single-scenario feature file:

    Feature: <group name>

    <tags, one per line>
    Scenario: <scenario name>
    <keyword> <step text>
    ...

    # Generated by <tool name>, <timestamp>
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..record.schema import ScenarioRecord

LOGGER = logging.getLogger(__name__)

TOOL_NAME = "scenario-split"

LINE_SEPARATORS = {
    "lf": "\n",
    "crlf": "\r\n",
    "native": os.linesep,
}


@dataclass
class RenderConfig:
    """Configuration for feature rendering."""
    tool_name: str = TOOL_NAME
    line_separator: str = os.linesep
    timestamp_format: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RenderConfig":
        """Build a config from a mapping, ignoring unknown keys.

        ``line_separator`` may be ``lf``, ``crlf``, ``native`` or a literal
        separator.

        Raises:
            ValueError: If the line separator is empty or unknown.
        """
        values = {
            k: v for k, v in data.items()
            if k in cls.__dataclass_fields__ and v is not None
        }
        if "line_separator" in values:
            values["line_separator"] = resolve_line_separator(values["line_separator"])
        return cls(**values)


def resolve_line_separator(value: str) -> str:
    """Map a symbolic separator name to the separator itself."""
    if value in LINE_SEPARATORS:
        return LINE_SEPARATORS[value]
    if value.lower() in LINE_SEPARATORS:
        return LINE_SEPARATORS[value.lower()]
    if value in ("\n", "\r\n", "\r"):
        return value
    raise ValueError(
        f"Invalid line separator {value!r}. Must be one of: "
        f"{', '.join(sorted(LINE_SEPARATORS))}"
    )


class FeatureRenderer:
    """Renders scenario records as feature file text."""

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()

    def render(self, record: ScenarioRecord, timestamp: datetime) -> str:
        """Render a record as feature file content.

        Args:
            record: Scenario to render.
            timestamp: Instant embedded in the generation comment.

        Returns:
            Complete feature file text, every line terminated by the
            configured line separator.
        """
        separator = self.config.line_separator
        lines = self.render_lines(record, timestamp)

        LOGGER.debug(
            "Rendered scenario '%s' of feature '%s' (%d steps)",
            record.name, record.group_name, record.step_count,
        )

        return "".join(line + separator for line in lines)

    def render_lines(self, record: ScenarioRecord, timestamp: datetime) -> list[str]:
        """Render a record as a list of lines without separators."""
        lines = [f"Feature: {record.group_name}", ""]
        lines.extend(record.tags)
        lines.append(f"Scenario: {record.name}")
        lines.extend(str(step_line) for step_line in record.step_lines)
        lines.append("")
        lines.append(self.footer(timestamp))
        return lines

    def footer(self, timestamp: datetime) -> str:
        """Generation comment line."""
        return f"# Generated by {self.config.tool_name}, {self.format_timestamp(timestamp)}"

    def format_timestamp(self, timestamp: datetime) -> str:
        if self.config.timestamp_format:
            return timestamp.strftime(self.config.timestamp_format)
        return timestamp.isoformat()


def render(
    record: ScenarioRecord,
    timestamp: datetime,
    config: Optional[RenderConfig] = None,
) -> str:
    """Render a record with the given (or default) configuration."""
    return FeatureRenderer(config).render(record, timestamp)
