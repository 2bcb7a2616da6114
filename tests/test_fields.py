from datetime import timedelta
from typing import Optional

import pytest
from pydantic import BaseModel, ValidationError

from durationfmt.fields import DurationStr, OptionalDurationStr


class Settings(BaseModel):
    duration: DurationStr


class OptionalSettings(BaseModel):
    timeout: OptionalDurationStr = None


def test_validate_json_document():
    settings = Settings.model_validate_json('{"duration":"1234s"}')
    assert settings.duration == timedelta(seconds=1234)


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (1200, '{"duration":"20m"}'),
        (5, '{"duration":"5s"}'),
        (1200 * 60, '{"duration":"20h"}'),
    ],
)
def test_dump_json(seconds, expected):
    settings = Settings(duration=timedelta(seconds=seconds))
    assert settings.model_dump_json() == expected


def test_python_dump_keeps_timedelta():
    settings = Settings(duration="5m")
    assert settings.model_dump() == {"duration": timedelta(minutes=5)}
    assert settings.model_dump(mode="json") == {"duration": "5m"}


@pytest.mark.parametrize("raw", ['""', '"10"', '"10x"', '"xs"', '"-5s"', '"5.5s"'])
def test_invalid_text_is_a_validation_error(raw):
    with pytest.raises(ValidationError) as excinfo:
        Settings.model_validate_json(f'{{"duration":{raw}}}')
    assert "duration" in str(excinfo.value)


def test_non_string_input_is_rejected():
    with pytest.raises(ValidationError):
        Settings.model_validate({"duration": 30})


def test_optional_field_treats_unknown_unit_as_absent():
    assert OptionalSettings.model_validate_json('{"timeout":""}').timeout is None
    assert OptionalSettings.model_validate_json('{"timeout":"10"}').timeout is None
    assert OptionalSettings.model_validate_json('{"timeout":null}').timeout is None
    assert OptionalSettings().timeout is None


def test_optional_field_decodes_and_dumps():
    settings = OptionalSettings.model_validate_json('{"timeout":"90s"}')
    assert settings.timeout == timedelta(seconds=90)
    assert settings.model_dump_json() == '{"timeout":"1m"}'
    assert OptionalSettings().model_dump_json() == '{"timeout":null}'


def test_optional_field_still_rejects_malformed_numbers():
    with pytest.raises(ValidationError):
        OptionalSettings.model_validate_json('{"timeout":"xs"}')


def test_annotation_composes_with_optional():
    class Limits(BaseModel):
        idle: Optional[DurationStr] = None

    assert Limits.model_validate_json('{"idle":"2h"}').idle == timedelta(hours=2)
    assert Limits.model_validate_json("{}").idle is None


def test_negative_timedelta_is_rejected_at_validation():
    with pytest.raises(ValidationError, match="Negative durations"):
        Settings(duration=timedelta(seconds=-1))
    with pytest.raises(ValidationError, match="Negative durations"):
        OptionalSettings(timeout=timedelta(microseconds=-1))
    assert Settings(duration=timedelta(0)).model_dump_json() == '{"duration":"0s"}'
