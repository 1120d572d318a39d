import json

import pytest

from dot_dev.errors import ErrorKind, ValidationError
from dot_dev.models import Config, EnvironmentVariable, Profile, Variable
from dot_dev.store import load_config, save_config


def test_missing_file_loads_empty_config(tmp_path):
    assert load_config(tmp_path / "absent.json") == Config()


def test_save_writes_pretty_json_without_absent_fields(tmp_path):
    path = tmp_path / "nested" / "env.json"
    default = Profile(
        "default",
        definitions=(Variable(EnvironmentVariable("A", default_value="x")),),
    )
    config = Config(default_profile=default, profiles=(Profile("staging"),))
    save_config(config, path)

    text = path.read_text(encoding="utf-8")
    assert text.startswith('{\n  "default_profile": {')
    assert json.loads(text) == {
        "default_profile": {
            "name": "default",
            "definitions": [
                {"Variable": {"name": "A", "required": False, "default_value": "x"}}
            ],
        },
        "profiles": [{"name": "staging", "definitions": []}],
    }
    assert load_config(path) == config
    assert [p.name for p in path.parent.iterdir()] == ["env.json"]


def test_malformed_json_is_a_validation_failure(tmp_path):
    path = tmp_path / "env.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValidationError) as exc:
        load_config(path)
    assert exc.value.kind is ErrorKind.VALIDATION_FAILURE
    assert "Failed to parse config file" in str(exc.value)


def test_undecodable_bytes_are_a_validation_failure(tmp_path):
    path = tmp_path / "env.json"
    path.write_bytes(b"\xff\xfe{}")
    with pytest.raises(ValidationError) as exc:
        load_config(path)
    assert exc.value.kind is ErrorKind.VALIDATION_FAILURE
    assert "Failed to parse config file" in str(exc.value)


def test_wrong_root_type_rejected(tmp_path):
    path = tmp_path / "env.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(path)
