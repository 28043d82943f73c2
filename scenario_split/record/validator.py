"""Record validator for scenario-split.

Checks a ScenarioRecord against the rules a re-parseable feature file needs.
"""

from .schema import (
    KNOWN_KEYWORDS,
    ScenarioRecord,
    ValidationIssue,
    ValidationResult,
)


def validate_record(record: ScenarioRecord) -> ValidationResult:
    """Validate a ScenarioRecord.

    Checks:
    - Feature and scenario names are present
    - Steps and keywords are aligned and single-line
    - Tags and keywords look like Gherkin

    Args:
        record: ScenarioRecord to validate.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    _validate_names(record, errors)
    _validate_tags(record, warnings)
    _validate_steps(record, errors, warnings)

    if not record.steps:
        warnings.append(ValidationIssue(
            path="steps",
            message="No steps defined.",
            severity="warning",
        ))

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def _validate_names(
    record: ScenarioRecord,
    errors: list[ValidationIssue],
) -> None:
    if not record.group_name.strip():
        errors.append(ValidationIssue(
            path="group_name",
            message="Feature name is required and must not be empty.",
        ))
    elif _has_line_break(record.group_name):
        errors.append(ValidationIssue(
            path="group_name",
            message="Feature name must be a single line.",
        ))

    if not record.name.strip():
        errors.append(ValidationIssue(
            path="name",
            message="Scenario name is required and must not be empty.",
        ))
    elif _has_line_break(record.name):
        errors.append(ValidationIssue(
            path="name",
            message="Scenario name must be a single line.",
        ))


def _validate_tags(
    record: ScenarioRecord,
    warnings: list[ValidationIssue],
) -> None:
    for i, tag in enumerate(record.tags):
        if not tag.startswith("@"):
            warnings.append(ValidationIssue(
                path=f"tags[{i}]",
                message=f"Tag '{tag}' does not start with '@'.",
                severity="warning",
            ))


def _validate_steps(
    record: ScenarioRecord,
    errors: list[ValidationIssue],
    warnings: list[ValidationIssue],
) -> None:
    if len(record.steps) != len(record.keywords):
        errors.append(ValidationIssue(
            path="keywords",
            message=f"Expected one keyword per step, got {len(record.keywords)} "
                    f"keywords for {len(record.steps)} steps.",
        ))
        return

    for i, (keyword, text) in enumerate(record.step_lines):
        path = f"steps[{i}]"

        if _has_line_break(keyword) or _has_line_break(text):
            errors.append(ValidationIssue(
                path=path,
                message="Step keyword and text must be a single line.",
            ))

        if keyword not in KNOWN_KEYWORDS:
            warnings.append(ValidationIssue(
                path=f"{path}.keyword",
                message=f"Unknown keyword '{keyword}'. Expected one of: "
                        f"{', '.join(sorted(KNOWN_KEYWORDS))}",
                severity="warning",
            ))


def _has_line_break(value: str) -> bool:
    return "\n" in value or "\r" in value
