"""Record module - scenario data extracted from feature files."""

from .schema import (
    KNOWN_KEYWORDS,
    Named,
    ScenarioRecord,
    StepLine,
    Textual,
    ValidationError,
    ValidationIssue,
    ValidationResult,
)
from .parser import parse_record, parse_record_data
from .validator import validate_record

__all__ = [
    "KNOWN_KEYWORDS",
    "Named",
    "ScenarioRecord",
    "StepLine",
    "Textual",
    "ValidationError",
    "ValidationIssue",
    "ValidationResult",
    "parse_record",
    "parse_record_data",
    "validate_record",
]
