from scenario_split.record.schema import ScenarioRecord
from scenario_split.record.validator import validate_record


def _paths(issues):
    return [issue.path for issue in issues]


def test_login_record_is_valid(login_record):
    result = validate_record(login_record)

    assert result.valid
    assert result.errors == []
    assert result.warnings == []


def test_blank_names_are_errors():
    result = validate_record(ScenarioRecord([], " ", "", ["x"], ["Given"]))

    assert not result.valid
    assert _paths(result.errors) == ["group_name", "name"]


def test_multiline_values_are_errors():
    record = ScenarioRecord(
        tags=[],
        group_name="Login\nAgain",
        name="Valid login",
        steps=["first line\nsecond line"],
        keywords=["Given"],
    )

    result = validate_record(record)

    assert _paths(result.errors) == ["group_name", "steps[0]"]


def test_tag_and_keyword_warnings():
    record = ScenarioRecord(
        tags=["@smoke", "slow"],
        group_name="Login",
        name="Valid login",
        steps=["the user opens the app", "it works"],
        keywords=["Given", "Whenever"],
    )

    result = validate_record(record)

    assert result.valid
    assert _paths(result.warnings) == ["tags[1]", "steps[1].keyword"]
    assert all(w.severity == "warning" for w in result.warnings)


def test_no_steps_is_a_warning():
    result = validate_record(ScenarioRecord([], "Login", "Empty"))

    assert result.valid
    assert _paths(result.warnings) == ["steps"]


def test_mismatch_reported_for_records_built_around_constructor(login_record):
    object.__setattr__(login_record, "keywords", ("Given",))

    result = validate_record(login_record)

    assert not result.valid
    assert _paths(result.errors) == ["keywords"]
