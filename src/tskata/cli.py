"""Top-level Click group for the tskata CLI."""

import os
import sys

import click

from tskata.errors import CancelledByOperator, InvalidAnswer, StepFailed
from tskata.pipeline import StepPipeline
from tskata.planner import ScaffoldPlanner
from tskata.prompter import Prompter, required
from tskata.scaffold_opts import (
    DEFAULT_DOJO_FOLDER,
    DEFAULT_DOJO_HTTPS_URL,
    DEFAULT_DOJO_SSH_URL,
    DEFAULT_PROJECT_NAME,
    DojoSettings,
    Mode,
)

EXIT_FAILED = 1
EXIT_CANCELLED = 130


def collect_answers(prompter, lesson=None, project_name=None, folder_name=None):
    """Ask for whichever answers were not given on the command line.

    Returns:
        (mode, project_name, folder_name) tuple.
    """
    if lesson is None:
        lesson = prompter.confirm("Is this a Dojo lesson?", default=False)
    if project_name is None:
        project_name = prompter.ask(
            "What is your project name?", default=DEFAULT_PROJECT_NAME, validator=required,
        )
    if folder_name is None:
        question = "What is the lesson folder name?" if lesson else "Which folder should the project go in?"
        folder_name = prompter.ask(question, default=project_name, validator=required)
    return Mode.from_flag(lesson), project_name, folder_name


@click.group()
def main():
    """tskata - set up TypeScript kata projects."""


@main.command("new")
@click.option("--lesson/--standalone", default=None, help="Create a Dojo lesson or a standalone project.")
@click.option("--name", "project_name", help="Project name written to package.json.")
@click.option("--folder", "folder_name", help="Folder to create (lesson folder in lesson mode).")
@click.option("--dojo-folder", envvar="TSKATA_DOJO_FOLDER", default=DEFAULT_DOJO_FOLDER,
              show_default=True, help="Folder holding the shared Dojo repository.")
@click.option("--dojo-ssh-url", envvar="TSKATA_DOJO_SSH_URL", default=DEFAULT_DOJO_SSH_URL,
              show_default=True, help="Dojo repository URL tried first.")
@click.option("--dojo-https-url", envvar="TSKATA_DOJO_HTTPS_URL", default=DEFAULT_DOJO_HTTPS_URL,
              show_default=True, help="Dojo repository URL used when the SSH clone fails.")
def new_cmd(lesson, project_name, folder_name, dojo_folder, dojo_ssh_url, dojo_https_url):
    """Ask a few questions and scaffold a TypeScript kata project."""
    click.echo("Set up Typescript project", err=True)
    click.echo("", err=True)

    dojo = DojoSettings(
        folder=os.path.expanduser(dojo_folder),
        ssh_url=dojo_ssh_url,
        https_url=dojo_https_url,
    )
    planner = ScaffoldPlanner(dojo=dojo)
    try:
        mode, project_name, folder_name = collect_answers(
            Prompter(), lesson, project_name, folder_name,
        )
        steps = planner.plan(mode, project_name, folder_name)
        StepPipeline().run(steps, planner.context)
    except CancelledByOperator as exc:
        click.echo(f"Cancelled: {exc}", err=True)
        sys.exit(EXIT_CANCELLED)
    except InvalidAnswer as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_FAILED)
    except StepFailed as exc:
        click.echo(f"Error: {exc.title} failed", err=True)
        click.echo(f"  {exc.cause}", err=True)
        sys.exit(EXIT_FAILED)

    click.echo(f"Project installed in {planner.context.install_path}")
    click.echo("You're all set!")


if __name__ == "__main__":  # pragma: no cover
    main()
