"""Tests for git helpers: repository detection, branch names and command lines."""

import os

import pytest
from git import Repo

from tskata.git_utils import (
    add_command,
    branch_exists,
    branch_name_for,
    checkout_new_branch_command,
    clone_command,
    commit_command,
    init_command,
    is_git_repo,
)


class TestBranchNameFor:

    @pytest.mark.parametrize("folder,branch", [
        ("arrays", "arrays"),
        ("my first lesson", "my_first_lesson"),
        ("tabs\there", "tabs_here"),
        ("  padded  ", "padded"),
        ("two  spaces", "two__spaces"),
    ])
    def test_replaces_whitespace_with_underscores(self, folder, branch):
        assert branch_name_for(folder) == branch


class TestIsGitRepo:

    def test_true_for_initialised_repo(self, tmp_path):
        Repo.init(tmp_path)
        assert is_git_repo(str(tmp_path))

    def test_false_for_plain_directory(self, tmp_path):
        assert not is_git_repo(str(tmp_path))

    def test_false_for_missing_directory(self, tmp_path):
        assert not is_git_repo(str(tmp_path / "missing"))

    def test_false_for_subdirectory_of_repo(self, tmp_path):
        Repo.init(tmp_path)
        os.makedirs(tmp_path / "lesson")
        assert not is_git_repo(str(tmp_path / "lesson"))


class TestBranchExists:

    def test_finds_existing_branch(self, tmp_path):
        repo = Repo.init(tmp_path)
        repo.config_writer().set_value("user", "email", "test@test.com").release()
        repo.config_writer().set_value("user", "name", "Test").release()
        (tmp_path / "README.md").write_text("# dojo\n")
        repo.index.add(["README.md"])
        repo.index.commit("Initial")
        repo.create_head("my_lesson")

        assert branch_exists(str(tmp_path), "my_lesson")
        assert not branch_exists(str(tmp_path), "other")

    def test_false_outside_repository(self, tmp_path):
        assert not branch_exists(str(tmp_path), "main")


class TestCommandLines:

    def test_init_uses_main(self):
        assert init_command() == "git init --initial-branch=main"

    def test_clone_quotes_arguments(self):
        assert clone_command("git@github.com:o/r.git", "my dojo") == "git clone git@github.com:o/r.git 'my dojo'"

    def test_checkout_new_branch(self):
        assert checkout_new_branch_command("my_lesson") == "git checkout -b my_lesson"

    def test_add_separates_paths(self):
        assert add_command("/tmp/dojo/my lesson") == "git add -- '/tmp/dojo/my lesson'"

    def test_commit_quotes_message(self):
        assert commit_command("Set up kata-ts") == "git commit -m 'Set up kata-ts'"
