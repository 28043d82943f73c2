from dataclasses import FrozenInstanceError, dataclass

import pytest

from scenario_split.record.schema import (
    Named,
    ScenarioRecord,
    StepLine,
    Textual,
    ValidationError,
    ValidationResult,
    ValidationIssue,
)


@dataclass
class PickleTag:
    name: str


@dataclass
class PickleStep:
    text: str


def test_mismatched_steps_and_keywords_raise():
    with pytest.raises(ValidationError) as excinfo:
        ScenarioRecord(
            tags=[],
            group_name="Login",
            name="Valid login",
            steps=["a", "b"],
            keywords=["Given"],
        )

    assert excinfo.value.path == "keywords"
    assert "1 keywords for 2 steps" in str(excinfo.value)
    assert excinfo.value.issues[0].severity == "error"


def test_validation_error_is_a_value_error():
    with pytest.raises(ValueError):
        ScenarioRecord([], "Login", "Valid login", ["a"], [])


def test_values_are_stored_verbatim():
    record = ScenarioRecord(
        tags=["smoke", "@smoke", "@smoke"],
        group_name="  Login ",
        name="valid LOGIN",
        steps=["  spaced  "],
        keywords=["given"],
    )

    assert record.tags == ("smoke", "@smoke", "@smoke")
    assert record.group_name == "  Login "
    assert record.name == "valid LOGIN"
    assert record.steps == ("  spaced  ",)
    assert record.keywords == ("given",)


def test_record_does_not_alias_caller_lists():
    tags = ["@smoke"]
    steps = ["the user opens the app"]
    keywords = ["Given"]
    record = ScenarioRecord(tags, "Login", "Valid login", steps, keywords)

    tags.append("@slow")
    steps.append("another step")
    keywords.clear()

    assert record.tags == ("@smoke",)
    assert record.steps == ("the user opens the app",)
    assert record.keywords == ("Given",)


def test_record_is_frozen(login_record):
    with pytest.raises(FrozenInstanceError):
        login_record.name = "Other"


def test_empty_tags_and_steps_are_valid():
    record = ScenarioRecord(tags=[], group_name="Login", name="Empty")

    assert record.tags == ()
    assert record.step_lines == ()
    assert record.step_count == 0


def test_from_parsed_maps_tag_names_and_step_texts():
    record = ScenarioRecord.from_parsed(
        tags=[PickleTag("@smoke"), PickleTag("@login"), PickleTag("@smoke")],
        group_name="Login",
        name="Valid login",
        steps=[PickleStep("the user opens the app"), PickleStep("the user logs in")],
        keywords=iter(["Given", "When"]),
    )

    assert record.tags == ("@smoke", "@login", "@smoke")
    assert record.steps == ("the user opens the app", "the user logs in")
    assert record.keywords == ("Given", "When")


def test_from_parsed_still_checks_alignment():
    with pytest.raises(ValidationError):
        ScenarioRecord.from_parsed(
            tags=[],
            group_name="Login",
            name="Valid login",
            steps=[PickleStep("a")],
            keywords=["Given", "And"],
        )


def test_parser_objects_satisfy_protocols():
    assert isinstance(PickleTag("@smoke"), Named)
    assert isinstance(PickleStep("a step"), Textual)


def test_from_step_lines_splits_pairs():
    record = ScenarioRecord.from_step_lines(
        tags=["@smoke"],
        group_name="Login",
        name="Valid login",
        step_lines=[("Given", "the user opens the app"), ("Then", "it works")],
    )

    assert record.keywords == ("Given", "Then")
    assert record.steps == ("the user opens the app", "it works")
    assert record.step_lines == (
        StepLine("Given", "the user opens the app"),
        StepLine("Then", "it works"),
    )


def test_step_line_str():
    assert str(StepLine("And", "the user logs out")) == "And the user logs out"


def test_debug_string_lists_fields_in_order(login_record):
    text = str(login_record)

    assert text.startswith("ScenarioRecord{tags=['@smoke']")
    labels = ["tags=", "group_name='Login'", "name='Valid login'", "steps=", "keywords="]
    positions = [text.index(label) for label in labels]
    assert positions == sorted(positions)
    assert "keywords=['Given', 'When', 'Then']}" in text


def test_validation_result_str():
    assert str(ValidationResult(valid=True)) == "Valid"
    warning = ValidationIssue("tags[0]", "no @", severity="warning")
    assert str(ValidationResult(valid=True, warnings=[warning])) == "Valid (1 warnings)"
    error = ValidationIssue("name", "empty")
    assert str(ValidationResult(valid=False, errors=[error])) == "Invalid: 1 errors, 0 warnings"
