"""YAML record loader for scenario-split.

Loads already-extracted scenario data from YAML into ScenarioRecord objects.
This does not parse Gherkin; the upstream splitter writes these records.
"""

import logging
from pathlib import Path
from typing import Any, Union

import yaml

from .schema import ScenarioRecord, StepLine

LOGGER = logging.getLogger(__name__)

_FIELD_ALIASES = {
    "feature": ("feature", "group_name"),
    "scenario": ("scenario", "name"),
}


def parse_record(file_path: Union[str, Path]) -> ScenarioRecord:
    """Parse a YAML record file into a ScenarioRecord.

    Args:
        file_path: Path to the YAML record file.

    Returns:
        Parsed ScenarioRecord.

    Raises:
        FileNotFoundError: If the record file doesn't exist.
        ValueError: If the YAML is malformed or missing required fields.
        ValidationError: If the record violates a record invariant.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Record file not found: {file_path}")

    if file_path.suffix not in (".yaml", ".yml"):
        raise ValueError(f"Expected .yaml or .yml file, got: {file_path.suffix}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed YAML in {file_path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty record file: {file_path}")

    return parse_record_data(data, source=str(file_path))


def parse_record_data(data: Any, source: str = "<inline>") -> ScenarioRecord:
    """Parse a record from a dictionary (already loaded YAML).

    Args:
        data: Mapping with record data.
        source: Source identifier for error messages.

    Returns:
        Parsed ScenarioRecord.

    Raises:
        ValueError: If required fields are missing or malformed.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Record must be a YAML mapping, got {type(data).__name__}")

    feature = _require_field(data, "feature", source)
    scenario = _require_field(data, "scenario", source)

    tags_data = data.get("tags") or []
    if not isinstance(tags_data, list):
        raise ValueError(f"'tags' must be a list in {source}")
    for i, tag in enumerate(tags_data):
        if isinstance(tag, (dict, list)):
            raise ValueError(f"Tag {i} must be a string in {source}")

    steps_data = data.get("steps") or []
    if not isinstance(steps_data, list):
        raise ValueError(f"'steps' must be a list in {source}")

    step_lines = [
        _parse_step(step_data, i, source)
        for i, step_data in enumerate(steps_data)
    ]

    LOGGER.debug(
        "Loaded record '%s' from %s (%d tags, %d steps)",
        scenario, source, len(tags_data), len(step_lines),
    )

    return ScenarioRecord.from_step_lines(
        tags=[str(tag) for tag in tags_data],
        group_name=feature,
        name=scenario,
        step_lines=step_lines,
    )


def _parse_step(step_data: Any, index: int, source: str) -> StepLine:
    """Parse one step entry.

    Either ``{keyword: ..., text: ...}`` or a single-entry mapping such as
    ``{Given: the user opens the app}``.
    """
    if not isinstance(step_data, dict):
        raise ValueError(f"Step {index} must be a mapping in {source}")

    if "keyword" in step_data or "text" in step_data:
        for field_name in ("keyword", "text"):
            if field_name not in step_data:
                raise ValueError(
                    f"Missing required field '{field_name}' in steps[{index}] ({source})"
                )
        return StepLine(str(step_data["keyword"]), _scalar(step_data["text"]))

    if len(step_data) != 1:
        raise ValueError(
            f"Step {index} must have exactly one keyword entry in {source}"
        )

    keyword, text = next(iter(step_data.items()))
    return StepLine(str(keyword), _scalar(text))


def _require_field(data: dict, field_name: str, source: str) -> str:
    """Return a required scalar field, accepting its aliases."""
    for key in _FIELD_ALIASES[field_name]:
        if key in data and data[key] is not None:
            value = data[key]
            if isinstance(value, (dict, list)):
                raise ValueError(f"'{key}' must be a string in {source}")
            return str(value)
    raise ValueError(f"Missing required field '{field_name}' in {source}")


def _scalar(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
