"""Tests for record (de)serialization and the command line entry point."""

import io
import json

import pytest
from pydantic import ValidationError

from docnorm import DocRecord, get_props
from docnorm.cli import main

INTROSPECTED = {
    "description": "A button.\n\n@visibleName Fancy Button\n@example ./demo.md",
    "displayName": "",
    "methods": [
        {
            "name": "focus",
            "docblock": "Focus it.\n\n@public\n@param {boolean} select Select text",
            "modifiers": [],
            "params": [{"name": "select", "type": None}],
            "returns": None,
        },
        {"name": "internal", "docblock": "Not public.", "params": []},
    ],
    "props": {
        "size": {
            "type": {"name": "enum"},
            "required": False,
            "description": "Size.",
            "defaultValue": {"value": "'normal'", "computed": False},
        },
        "secret": {"type": {"name": "string"}, "description": "@ignore"},
        "onClick": {"type": {"name": "func"}, "required": False},
    },
}


DOCGEN_OUTPUT = {
    "description": "A button.",
    "composes": ["./BaseButton"],
    "methods": [
        {
            "name": "focus",
            "docblock": "Focus it.\n@public",
            "description": "Focus it.",
            "modifiers": ["async"],
            "params": [
                {"name": "select", "optional": True, "type": {"name": "boolean"}}
            ],
            "returns": None,
        }
    ],
    "props": {
        "size": {
            "type": {
                "name": "enum",
                "value": [
                    {"value": "'small'", "computed": False},
                    {"value": "'large'", "computed": False},
                ],
            },
            "flowType": {"name": "union", "raw": "'small' | 'large'"},
            "tsType": {"name": "union", "raw": "'small' | 'large'"},
            "required": False,
            "description": "Size.",
            "defaultValue": {"value": "'small'", "computed": False},
        },
        "onClick": {
            "type": {"name": "func"},
            "defaultValue": {"value": "() => {}", "computed": True},
        },
    },
}


class TestRecordSchema:
    """Introspection JSON in, normalized JSON out."""

    def test_from_dict(self):
        record = DocRecord.from_dict(INTROSPECTED)

        assert record.display_name == ""
        assert [m.name for m in record.methods] == ["focus", "internal"]
        assert record.methods[0].params[0].type is None
        assert record.props["size"].type == "enum"
        assert record.props["size"].default_value == "'normal'"
        assert record.props["onClick"].description is None

    def test_type_as_string(self):
        record = DocRecord.from_dict(
            {"methods": [{"name": "m", "params": [{"name": "a", "type": "number"}]}]}
        )
        assert record.methods[0].params[0].type == "number"

    def test_invalid_record(self):
        with pytest.raises(ValidationError):
            DocRecord.from_dict({"methods": [{"docblock": "no name"}]})

    def test_to_dict_round_trip(self):
        record = DocRecord.from_dict(INTROSPECTED)
        assert DocRecord.from_dict(record.to_dict()) == record

    def test_unmodeled_fields_survive_normalization(self):
        output = get_props(DOCGEN_OUTPUT).to_dict()

        (method,) = output["methods"]
        assert method["description"] == "Focus it."
        assert method["modifiers"] == ["async"]
        assert method["params"] == [
            {"name": "select", "optional": True, "type": {"name": "boolean"}}
        ]
        size = output["props"]["size"]
        assert size["type"] == DOCGEN_OUTPUT["props"]["size"]["type"]
        assert size["flowType"] == DOCGEN_OUTPUT["props"]["size"]["flowType"]
        assert size["tsType"] == DOCGEN_OUTPUT["props"]["size"]["tsType"]
        assert size["defaultValue"] == {"value": "'small'", "computed": False}
        assert output["props"]["onClick"]["defaultValue"] == {
            "value": "() => {}",
            "computed": True,
        }
        assert output["composes"] == ["./BaseButton"]

    def test_unmodeled_fields_round_trip(self):
        record = DocRecord.from_dict(DOCGEN_OUTPUT)
        assert DocRecord.from_dict(record.to_dict()) == record


class TestCli:
    """docnorm command."""

    def test_normalizes_record(self, tmp_path, source_file, capsys):
        (source_file.parent / "demo.md").write_text("demo")
        record_file = tmp_path / "button.json"
        record_file.write_text(json.dumps(INTROSPECTED))

        code = main([str(record_file), "--source", str(source_file)])

        assert code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["displayName"] == "Button"
        assert output["visibleName"] == "Fancy Button"
        assert output["description"] == "A button."
        assert [m["name"] for m in output["methods"]] == ["focus"]
        assert output["methods"][0]["params"][0]["description"] == "Select text"
        assert sorted(output["props"]) == ["onClick", "size"]
        assert output["props"]["onClick"]["description"] == ""
        assert output["example"]["require"].endswith("demo.md")
        assert "example" not in output["doclets"]
        assert "visibleName" not in output["tags"]

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO('{"description": "Hi."}'))

        assert main(["-"]) == 0
        assert json.loads(capsys.readouterr().out)["description"] == "Hi."

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json")]) == 1
        assert "Cannot read" in capsys.readouterr().err

    def test_invalid_record(self, tmp_path, capsys):
        record_file = tmp_path / "bad.json"
        record_file.write_text(json.dumps({"props": {"a": {"required": "maybe"}}}))

        assert main([str(record_file)]) == 1
        assert "Invalid record" in capsys.readouterr().err

    def test_malformed_tags(self, tmp_path, capsys):
        record_file = tmp_path / "bad.json"
        record_file.write_text(
            json.dumps({"methods": [{"name": "m", "docblock": "@public\n@param {x"}]})
        )

        assert main([str(record_file)]) == 1
        assert "Unbalanced braces" in capsys.readouterr().err
