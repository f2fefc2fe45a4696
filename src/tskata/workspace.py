"""WorkspaceNavigator: directory creation and working-directory moves for a scaffold run."""

import os

from tskata.errors import FileSystemError


def _levels(path):
    parts = [p for p in os.path.normpath(path).split(os.sep) if p not in ("", ".")]
    return len(parts)


class WorkspaceNavigator:
    """Owns every change to the process working directory during a run.

    ``depth`` counts the directory levels descended so far so the final
    restoration can climb back exactly that far. A run may first move into a
    root directory such as the Dojo container with ``enter_root``; that move
    is not a descent and is undone by ``leave_root``.
    """

    def __init__(self):
        self._depth = 0
        self._origin = None

    @property
    def depth(self):
        return self._depth

    @property
    def cwd(self):
        return os.getcwd()

    def ensure_dir(self, path):
        """Create ``path`` and its parents; an existing directory is fine."""
        try:
            os.makedirs(path, exist_ok=True)
        except FileExistsError:
            raise FileSystemError(path, "exists and is not a directory") from None
        except OSError as exc:
            raise FileSystemError(path, f"could not create directory ({exc.strerror or exc})") from exc

    def enter_root(self, path):
        """Change into ``path``, absolute or relative, and count descents from there."""
        if self._depth or self._origin is not None:
            raise RuntimeError("enter_root() must come before any other move")
        origin = os.getcwd()
        try:
            os.chdir(path)
        except OSError as exc:
            raise FileSystemError(path, f"could not enter directory ({exc.strerror or exc})") from exc
        self._origin = origin

    def leave_root(self):
        """Return to where the run was before ``enter_root``; a no-op without one."""
        if self._depth:
            raise RuntimeError(f"Cannot leave the root while {self._depth} levels below it")
        if self._origin is None:
            return
        try:
            os.chdir(self._origin)
        except OSError as exc:
            raise FileSystemError(self._origin, f"could not return to directory ({exc.strerror or exc})") from exc
        self._origin = None

    def descend(self, path):
        """Change into ``path``, relative to the current directory."""
        if os.path.isabs(path) or ".." in os.path.normpath(path).split(os.sep):
            raise ValueError(f"descend() takes a relative path below the current directory: {path}")
        try:
            os.chdir(path)
        except OSError as exc:
            raise FileSystemError(path, f"could not enter directory ({exc.strerror or exc})") from exc
        self._depth += _levels(path)

    def ascend_to(self, depth):
        """Climb ``depth`` levels back up; ``depth`` must equal the levels descended."""
        if depth != self._depth:
            raise RuntimeError(
                f"Cannot ascend {depth} levels; {self._depth} were descended"
            )
        if depth == 0:
            return
        os.chdir(os.path.join(*([os.pardir] * depth)))
        self._depth = 0
