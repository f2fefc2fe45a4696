"""Git helpers: repository detection, branch naming and command lines."""

import re
import shlex

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError

DEFAULT_BRANCH = "main"


def is_git_repo(path):
    """Return True if ``path`` is the top of a git working tree."""
    try:
        repo = Repo(path)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return False
    return repo.working_tree_dir is not None


def branch_name_for(folder_name):
    """Turn a lesson folder name into a branch name by replacing whitespace with underscores."""
    return re.sub(r"\s", "_", folder_name.strip())


def init_command(branch=DEFAULT_BRANCH):
    return f"git init --initial-branch={shlex.quote(branch)}"


def clone_command(url, directory):
    return f"git clone {shlex.quote(url)} {shlex.quote(directory)}"


def checkout_new_branch_command(branch):
    return f"git checkout -b {shlex.quote(branch)}"


def add_command(target):
    return f"git add -- {shlex.quote(target)}"


def commit_command(message):
    return f"git commit -m {shlex.quote(message)}"


# Exits 0 when the index matches HEAD, 1 when something is staged.
STAGED_CHANGES_COMMAND = "git diff --cached --quiet"


def branch_exists(path, branch):
    """Return True if the repository at ``path`` already has a local branch named ``branch``."""
    try:
        repo = Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return False
    return branch in [head.name for head in repo.heads]


def checkout_command(branch):
    return f"git checkout {shlex.quote(branch)}"
