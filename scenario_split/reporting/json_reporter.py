"""JSON report generator for rendered scenarios.

Generates structured JSON reports describing a render or validation run.
"""

import json
from datetime import datetime, timezone
from typing import Any, Optional

from ..record.schema import ScenarioRecord, ValidationResult


class JsonReporter:
    """Generates JSON reports for scenario-split commands."""

    def generate(
        self,
        record: ScenarioRecord,
        text: Optional[str] = None,
        output_path: Optional[str] = None,
        validation: Optional[ValidationResult] = None,
    ) -> dict[str, Any]:
        """Generate a JSON report for one record.

        Args:
            record: The rendered or validated record.
            text: Rendered feature text, if rendering happened.
            output_path: Path the text was written to.
            validation: Validation outcome for the record.

        Returns:
            Report dictionary ready for JSON serialization.
        """
        valid = validation.valid if validation else True

        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "feature": record.group_name,
            "scenario": record.name,
            "status": "valid" if valid else "invalid",
            "summary": {
                "tags": record.tag_count,
                "steps": record.step_count,
                "lines": len(text.splitlines()) if text is not None else 0,
            },
            "output": output_path,
            "errors": [
                {"path": e.path, "message": e.message}
                for e in (validation.errors if validation else [])
            ],
            "warnings": [
                {"path": w.path, "message": w.message}
                for w in (validation.warnings if validation else [])
            ],
        }

    def to_json_string(self, report: dict[str, Any], pretty: bool = True) -> str:
        """Convert report to JSON string."""
        if pretty:
            return json.dumps(report, indent=2, ensure_ascii=False)
        return json.dumps(report, ensure_ascii=False)

    def generate_flow_output(
        self,
        report: dict[str, Any],
        command: str,
    ) -> dict[str, Any]:
        """Generate flow CLI compatible JSON output.

        Follows the flow JSON output standard:
        {
            "success": bool,
            "command": str,
            "data": { ... },
            "message": str
        }

        Args:
            report: Report dictionary from ``generate``.
            command: Name of the command that produced the report.

        Returns:
            Flow-compatible JSON output.
        """
        success = report["status"] == "valid"
        summary = report["summary"]

        data: dict[str, Any] = {
            "feature": report["feature"],
            "scenario": report["scenario"],
            "tags": summary["tags"],
            "steps": summary["steps"],
            "errors": report["errors"],
            "warnings": report["warnings"],
        }

        if report.get("output"):
            data["output"] = report["output"]

        if not success:
            message = f"{len(report['errors'])} validation errors"
        elif command == "render":
            message = f"Rendered scenario '{report['scenario']}'"
        else:
            message = "Record is valid"

        return {
            "success": success,
            "command": command,
            "data": data,
            "message": message,
        }


def error_output(command: str, message: str, **extra) -> dict[str, Any]:
    """Flow JSON output for a failed command."""
    return {
        "success": False,
        "command": command,
        "data": extra or None,
        "message": message,
    }
