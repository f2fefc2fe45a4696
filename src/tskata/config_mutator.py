"""Read-merge-write updates for JSON config files such as package.json and tsconfig.json."""

import json
import os
import re
import shutil
import tempfile
from collections.abc import Mapping

from tskata.errors import ConfigParseError, FileSystemError

_STRING = r'"(?:\\.|[^"\\])*"'
# String literals are matched first so "src/**/*" and "https://..." survive;
# "//" right after a colon is never treated as a comment.
_COMMENT = re.compile(_STRING + r"|/\*.*?\*/|(?<!:)//[^\n]*", re.DOTALL)
_TRAILING_COMMA = re.compile(_STRING + r"|,(?=\s*[}\]])")


def _keep_strings(match):
    token = match.group(0)
    return token if token.startswith('"') else ""


def strip_comments(text):
    """Remove comment syntax from a machine-generated JSON-with-comments file.

    Strips ``/* ... */`` blocks and ``//`` line comments not preceded by a
    colon, drops blank lines, and removes commas left dangling before a
    closing brace or bracket. The transform is lossy; only apply it to files
    written by tools such as ``tsc --init``.
    """
    text = _COMMENT.sub(_keep_strings, text)
    lines = [line.rstrip() for line in text.splitlines() if line.strip()]
    return _TRAILING_COMMA.sub(_keep_strings, "\n".join(lines))


def _pairs(updates):
    if isinstance(updates, Mapping):
        return list(updates.items())
    return list(updates)


def _read_text(path):
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        raise FileSystemError(path, "file not found") from None
    except UnicodeDecodeError as exc:
        raise FileSystemError(path, f"not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc
    except OSError as exc:
        raise FileSystemError(path, f"could not read file ({exc.strerror or exc})") from exc


def _parse(path, text):
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(path, str(exc)) from exc
    if not isinstance(document, dict):
        raise ConfigParseError(path, "top level is not an object")
    return document


def _write_atomically(path, text):
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tskata-", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except OSError as exc:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise FileSystemError(path, f"could not write file ({exc.strerror or exc})") from exc


def update_config(path, updates, *, strip=False):
    """Apply shallow key updates to the JSON document at ``path``.

    Args:
        path: Config file to rewrite in place.
        updates: Mapping or sequence of ``(key, value)`` pairs. Each key
            replaces the whole top-level value; later pairs win.
        strip: Remove comment syntax before parsing (compiler config only).

    Returns:
        The merged document as written.

    Raises:
        FileSystemError: The file is missing, unreadable, not UTF-8 or unwritable.
        ConfigParseError: The content is not a JSON object.
    """
    text = _read_text(path)
    if strip:
        text = strip_comments(text)
    document = _parse(path, text)

    for key, value in _pairs(updates):
        document[key] = value

    _write_atomically(path, json.dumps(document, indent=2) + "\n")
    return document
