"""Operator answers and Dojo settings for a scaffold run."""

import os
from dataclasses import dataclass, field
from enum import Enum

from tskata.errors import InvalidAnswer

DEFAULT_PROJECT_NAME = "kata-ts"
DEFAULT_DOJO_FOLDER = "dojo"
DEFAULT_DOJO_SSH_URL = "git@github.com:kata-dojo/dojo.git"
DEFAULT_DOJO_HTTPS_URL = "https://github.com/kata-dojo/dojo.git"


class Mode(Enum):
    LESSON = "lesson"
    STANDALONE = "standalone"

    @classmethod
    def from_flag(cls, is_lesson):
        return cls.LESSON if is_lesson else cls.STANDALONE


@dataclass(frozen=True)
class DojoSettings:
    """Where the shared Dojo repository lives and how to clone it."""

    folder: str = DEFAULT_DOJO_FOLDER
    ssh_url: str = DEFAULT_DOJO_SSH_URL
    https_url: str = DEFAULT_DOJO_HTTPS_URL

    def validate(self):
        if not self.folder.strip():
            raise InvalidAnswer("Dojo folder is required")


@dataclass(frozen=True)
class ScaffoldOpts:
    """The operator's answers; fixed once the plan is built."""

    mode: Mode
    project_name: str
    folder_name: str
    dojo: DojoSettings = field(default_factory=DojoSettings)

    @property
    def is_lesson(self):
        return self.mode is Mode.LESSON

    def validate(self):
        """Reject empty answers before anything touches the disk."""
        if not isinstance(self.mode, Mode):
            raise InvalidAnswer(f"Unknown mode: {self.mode!r}")
        if not self.project_name or not self.project_name.strip():
            raise InvalidAnswer("Project name is required")
        if not self.folder_name or not self.folder_name.strip():
            raise InvalidAnswer("Folder name is required")
        if os.sep in self.folder_name or self.folder_name.strip() in (".", ".."):
            raise InvalidAnswer(f"Folder name must be a single directory name: {self.folder_name}")
        if self.is_lesson:
            self.dojo.validate()
