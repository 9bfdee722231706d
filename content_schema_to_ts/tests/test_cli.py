import json

import pytest
from click.testing import CliRunner

from content_schema_to_ts.content_schema_to_ts import content_schema_to_ts

SCHEMA = {
    "documentDefMap": {
        "Post": {
            "name": "Post",
            "label": "Post",
            "description": "A post",
            "fieldDefs": [{"type": "string", "name": "title", "required": True}],
            "computedFields": [],
        }
    },
    "objectDefMap": {},
}


@pytest.fixture
def schema_path(tmp_path):
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(SCHEMA))
    return path


class TestCli:
    def test_generates_declaration_file(self, tmp_path, schema_path):
        out_dir = tmp_path / "types"
        result = CliRunner().invoke(content_schema_to_ts, [str(schema_path), "-o", str(out_dir)])

        assert result.exit_code == 0, result.output
        text = (out_dir / "index.d.ts").read_text()
        assert "/** A post */\nexport type Post = {\n" in text
        assert "export type ObjectTypes = never\n" in text
        assert "Type file successfully written to" in result.output

    def test_config_file(self, tmp_path, schema_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"add_generation_comment": False, "output": {"target_dir": str(tmp_path / "cfg"), "file_name": "content.d.ts"}}))

        result = CliRunner().invoke(content_schema_to_ts, [str(schema_path), "-c", str(config_path)])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "cfg" / "content.d.ts").read_text().startswith("import type { Markdown }")

    def test_schema_json_flag(self, tmp_path, schema_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = CliRunner().invoke(content_schema_to_ts, [str(schema_path), "-o", "types", "--schema-json"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / ".contentlayer" / "schema.json").exists()

    def test_no_force_refuses_existing_file(self, tmp_path, schema_path):
        out_dir = tmp_path / "types"
        runner = CliRunner()
        assert runner.invoke(content_schema_to_ts, [str(schema_path), "-o", str(out_dir)]).exit_code == 0

        result = runner.invoke(content_schema_to_ts, [str(schema_path), "-o", str(out_dir), "--no-force"])
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_malformed_schema(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps({"documentDefMap": {"Post": {"fieldDefs": [{"name": "title"}]}}}))

        result = CliRunner().invoke(content_schema_to_ts, [str(path), "-o", str(tmp_path / "types")])
        assert result.exit_code == 1
        assert "#/documentDefMap/Post/fieldDefs/0" in result.output
