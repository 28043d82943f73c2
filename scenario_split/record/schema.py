"""Scenario record models for single-scenario feature rendering.

Defines the immutable record extracted from a parsed feature file and the
validation types shared by the loader and validator.
"""

from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Protocol, Sequence, runtime_checkable


KNOWN_KEYWORDS = {"Given", "When", "Then", "And", "But", "*"}


@runtime_checkable
class Named(Protocol):
    """Anything exposing a tag name (e.g. a parsed tag object)."""
    name: str


@runtime_checkable
class Textual(Protocol):
    """Anything exposing a step text body (e.g. a parsed step object)."""
    text: str


class StepLine(NamedTuple):
    """A step keyword paired with its text body."""
    keyword: str
    text: str

    def __str__(self) -> str:
        return f"{self.keyword} {self.text}"


@dataclass
class ValidationIssue:
    """A single validation finding."""
    path: str
    message: str
    severity: str = "error"  # "error" or "warning"


class ValidationError(ValueError):
    """Raised when scenario data violates a record invariant."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message
        self.issues = [ValidationIssue(path=path, message=message)]


@dataclass
class ValidationResult:
    """Result of record validation."""
    valid: bool
    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def __str__(self) -> str:
        if self.valid:
            msg = "Valid"
            if self.warnings:
                msg += f" ({self.warning_count} warnings)"
            return msg
        return f"Invalid: {self.error_count} errors, {self.warning_count} warnings"


@dataclass(frozen=True)
class ScenarioRecord:
    """A single scenario with its tags, steps and keywords.

    ``steps`` and ``keywords`` are parallel: ``keywords[i]`` belongs to
    ``steps[i]``. All sequences are copied into tuples on construction.

    Raises:
        ValidationError: If the step and keyword counts differ.
    """
    tags: Sequence[str]
    group_name: str
    name: str
    steps: Sequence[str] = ()
    keywords: Sequence[str] = ()

    def __post_init__(self):
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "steps", tuple(self.steps))
        object.__setattr__(self, "keywords", tuple(self.keywords))

        if len(self.steps) != len(self.keywords):
            raise ValidationError(
                "keywords",
                f"Expected one keyword per step, got {len(self.keywords)} "
                f"keywords for {len(self.steps)} steps.",
            )

    @classmethod
    def from_parsed(
        cls,
        tags: Iterable[Named],
        group_name: str,
        name: str,
        steps: Iterable[Textual],
        keywords: Iterable[str],
    ) -> "ScenarioRecord":
        """Build a record from parser objects.

        Args:
            tags: Tag objects exposing ``name``, in source order.
            group_name: Name of the feature the scenario belongs to.
            name: Scenario name.
            steps: Step objects exposing ``text``, in execution order.
            keywords: Step keywords aligned with ``steps``.

        Returns:
            The constructed ScenarioRecord.
        """
        return cls(
            tags=[tag.name for tag in tags],
            group_name=group_name,
            name=name,
            steps=[step.text for step in steps],
            keywords=list(keywords),
        )

    @classmethod
    def from_step_lines(
        cls,
        tags: Iterable[str],
        group_name: str,
        name: str,
        step_lines: Iterable[tuple[str, str]],
    ) -> "ScenarioRecord":
        """Build a record from ``(keyword, text)`` pairs."""
        pairs = [StepLine(*line) for line in step_lines]
        return cls(
            tags=list(tags),
            group_name=group_name,
            name=name,
            steps=[line.text for line in pairs],
            keywords=[line.keyword for line in pairs],
        )

    @property
    def step_lines(self) -> tuple[StepLine, ...]:
        """Steps paired with their keywords, in execution order."""
        return tuple(
            StepLine(keyword, text)
            for keyword, text in zip(self.keywords, self.steps)
        )

    @property
    def tag_count(self) -> int:
        return len(self.tags)

    @property
    def step_count(self) -> int:
        return len(self.steps)

    def __str__(self) -> str:
        return (
            "ScenarioRecord{"
            f"tags={list(self.tags)!r}"
            f", group_name={self.group_name!r}"
            f", name={self.name!r}"
            f", steps={list(self.steps)!r}"
            f", keywords={list(self.keywords)!r}"
            "}"
        )
