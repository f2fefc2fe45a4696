"""Tests for the packaged template renderer and boilerplate writer."""

import json
import os

import pytest

from tskata.boilerplate import EDITOR_FILES, LINT_FILES, SOURCE_FILES, write_boilerplate
from tskata.errors import FileSystemError
from tskata.templates.template_renderer import render_template


class TestRenderTemplate:

    def test_renders_project_name(self):
        result = render_template("README.md.j2", project_name="kata-ts")
        assert result.startswith("## kata-ts\n")

    def test_keeps_trailing_newline(self):
        assert render_template("gitignore.j2").endswith("node_modules/\ndist/\ncoverage/\n*.log\n.DS_Store\n")

    def test_missing_template_raises_error(self):
        with pytest.raises(FileNotFoundError):
            render_template("nonexistent.j2")

    @pytest.mark.parametrize("template_name", [
        "eslintrc.json.j2", "prettierrc.j2", "vscode_settings.json.j2",
    ])
    def test_json_templates_are_valid_json(self, template_name):
        json.loads(render_template(template_name))


class TestWriteBoilerplate:

    def test_writes_nested_files(self, tmp_path):
        written = write_boilerplate(EDITOR_FILES, {}, directory=str(tmp_path))
        settings = tmp_path / ".vscode" / "settings.json"
        assert written == [os.path.join(".vscode", "settings.json")]
        assert json.loads(settings.read_text(encoding="utf-8"))["editor.formatOnSave"] is True

    def test_writes_source_and_test_files(self, tmp_path):
        write_boilerplate(SOURCE_FILES, {"project_name": "kata-ts"}, directory=str(tmp_path))
        assert "export function sum" in (tmp_path / "src" / "main.ts").read_text(encoding="utf-8")
        assert "from '../src/main'" in (tmp_path / "tests" / "main.test.ts").read_text(encoding="utf-8")
        assert (tmp_path / "TECHDEBT.md").is_file()
        assert "kata-ts" in (tmp_path / "NOTES.md").read_text(encoding="utf-8")

    def test_overwrites_existing_files(self, tmp_path):
        (tmp_path / ".prettierrc").write_text("stale")
        write_boilerplate(LINT_FILES, {}, directory=str(tmp_path))
        assert "singleQuote" in (tmp_path / ".prettierrc").read_text(encoding="utf-8")

    def test_unwritable_destination_raises(self, tmp_path):
        (tmp_path / ".vscode").write_text("a file where a directory should be")
        with pytest.raises(FileSystemError):
            write_boilerplate(EDITOR_FILES, {}, directory=str(tmp_path))
