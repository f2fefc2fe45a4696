"""Boilerplate files dropped into a new kata project, keyed by their target path."""

import os

from tskata.errors import FileSystemError
from tskata.templates.template_renderer import render_template

IGNORE_FILES = {
    ".gitignore": "gitignore.j2",
}

LINT_FILES = {
    ".eslintrc.json": "eslintrc.json.j2",
    ".prettierrc": "prettierrc.j2",
}

EDITOR_FILES = {
    os.path.join(".vscode", "settings.json"): "vscode_settings.json.j2",
}

SOURCE_FILES = {
    os.path.join("src", "main.ts"): "main.ts.j2",
    os.path.join("tests", "main.test.ts"): "main.test.ts.j2",
    "README.md": "README.md.j2",
    "NOTES.md": "NOTES.md.j2",
    "TECHDEBT.md": "TECHDEBT.md.j2",
}


def write_boilerplate(files, variables, directory="."):
    """Render each template in ``files`` and write it under ``directory``.

    Existing files are overwritten so a re-run converges on the same content.

    Returns:
        The relative paths written, in order.
    """
    written = []
    for relative_path, template_name in files.items():
        destination = os.path.join(directory, relative_path)
        content = render_template(template_name, **variables)
        try:
            parent = os.path.dirname(destination)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(destination, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as exc:
            raise FileSystemError(destination, f"could not write file ({exc.strerror or exc})") from exc
        written.append(relative_path)
    return written
