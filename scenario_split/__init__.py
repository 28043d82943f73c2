"""Split feature files into single-scenario feature files."""

from .record import (
    ScenarioRecord,
    StepLine,
    ValidationError,
    parse_record,
    validate_record,
)
from .render import TOOL_NAME, FeatureRenderer, RenderConfig, render

__version__ = "0.1.0"

__all__ = [
    "TOOL_NAME",
    "FeatureRenderer",
    "RenderConfig",
    "ScenarioRecord",
    "StepLine",
    "ValidationError",
    "parse_record",
    "render",
    "validate_record",
]
