"""ScaffoldPlanner: turns the operator's answers into an ordered list of setup steps.

Lesson mode works inside the shared Dojo repository:

    <dojo>/                  cloned once, then reused
        <lesson>/code/       the kata project, on branch <lesson>
        <lesson>/theory/

Standalone mode creates ``<project>/`` with its own git repository. Both modes
then run the same npm, TypeScript, lint and scaffold steps and finish with a
commit and a climb back out of the directories they entered.
"""

import os

from tskata import boilerplate, git_utils
from tskata.config_mutator import update_config
from tskata.pipeline import PipelineContext, Step
from tskata.scaffold_opts import DojoSettings, Mode, ScaffoldOpts
from tskata.shell_runner import ShellRunner
from tskata.workspace import WorkspaceNavigator

RESTORATION_DEPTH = {
    Mode.LESSON: 2,
    Mode.STANDALONE: 1,
}

PACKAGE_FILE = "package.json"
COMPILER_CONFIG_FILE = "tsconfig.json"

TSC_INIT_COMMAND = "tsc --init --rootDir . --outDir dist"
DEV_DEPENDENCIES = [
    "typescript",
    "jest",
    "ts-jest",
    "@types/jest",
    "eslint",
    "prettier",
    "eslint-config-prettier",
    "@typescript-eslint/parser",
    "@typescript-eslint/eslint-plugin",
]

TSCONFIG_UPDATES = [
    ("include", ["src/**/*", "tests/**/*"]),
    ("exclude", ["node_modules", "dist"]),
]


def package_updates(project_name):
    """Keys written over the package.json produced by ``npm init -y``."""
    return [
        ("name", project_name),
        ("description", f"{project_name} kata"),
        ("main", "dist/src/main.js"),
        ("scripts", {
            "help": "npm run",
            "test": "jest",
            "coverage": "jest --coverage",
            "compile": "tsc",
            "kata": "node dist/src/main.js",
            "update-kata": "tsc && node dist/src/main.js",
            "lint": "eslint . --ext .ts",
            "format": "prettier --write .",
        }),
        ("jest", {
            "preset": "ts-jest",
            "testEnvironment": "node",
            "testMatch": ["**/tests/**/*.test.ts"],
        }),
    ]


class ScaffoldPlanner:
    """Builds the step list for one scaffold run.

    After ``plan()`` the shared PipelineContext is available as ``context``;
    pass it to StepPipeline.run together with the returned steps.
    """

    def __init__(self, shell=None, navigator=None, dojo=None):
        self._shell = shell or ShellRunner()
        self._navigator = navigator or WorkspaceNavigator()
        self._dojo = dojo or DojoSettings()
        self.context = None

    def plan(self, mode, project_name, folder_name):
        """Validate the answers and return the ordered steps for ``mode``.

        Raises:
            InvalidAnswer: An answer is empty; nothing has been touched.
        """
        opts = ScaffoldOpts(
            mode=mode,
            project_name=(project_name or "").strip(),
            folder_name=(folder_name or "").strip(),
            dojo=self._dojo,
        )
        opts.validate()
        self.context = PipelineContext(opts=opts, home_dir=os.getcwd())

        if opts.is_lesson:
            steps = self._lesson_steps(opts)
        else:
            steps = self._standalone_steps(opts)
        return steps + self._shared_steps(opts) + [
            Step("Creating first commit", self._commit),
            Step("Restoring working directory", self._restore(RESTORATION_DEPTH[opts.mode])),
        ]

    # --- Lesson mode ---

    def _lesson_steps(self, opts):
        return [
            Step("Preparing the Dojo repository", self._prepare_dojo),
            Step("Creating lesson folders", self._create_lesson_folders),
            Step("Creating lesson branch", self._create_lesson_branch),
        ]

    def _prepare_dojo(self, context):
        dojo = context.opts.dojo
        self._navigator.ensure_dir(dojo.folder)
        if git_utils.is_git_repo(dojo.folder):
            context.flags["repo_present"] = True
            status = f"Dojo repository already present in {dojo.folder}"
        else:
            self._shell.run_with_fallback(
                git_utils.clone_command(dojo.ssh_url, dojo.folder),
                git_utils.clone_command(dojo.https_url, dojo.folder),
            ).check()
            context.flags["repo_present"] = True
            status = f"Cloned Dojo repository into {dojo.folder}"
        self._navigator.enter_root(dojo.folder)
        context.home_dir = self._navigator.cwd
        return status

    def _create_lesson_folders(self, context):
        lesson = context.opts.folder_name
        self._navigator.ensure_dir(os.path.join(lesson, "code"))
        self._navigator.ensure_dir(os.path.join(lesson, "theory"))
        context.add_target = os.path.join(self._navigator.cwd, lesson)
        self._navigator.descend(os.path.join(lesson, "code"))
        context.project_dir = self._navigator.cwd
        return f"Created {lesson}/code and {lesson}/theory"

    def _create_lesson_branch(self, context):
        if not git_utils.is_git_repo(context.home_dir):
            context.flags["repo_present"] = False
            return "Dojo is not a git repository; no branch created"
        branch = git_utils.branch_name_for(context.opts.folder_name)
        context.branch_name = branch
        if git_utils.branch_exists(context.home_dir, branch):
            self._shell.run(git_utils.checkout_command(branch)).check()
            return f"Checked out existing branch {branch}"
        self._shell.run(git_utils.checkout_new_branch_command(branch)).check()
        return f"Created branch {branch}"

    # --- Standalone mode ---

    def _standalone_steps(self, opts):
        return [
            Step("Creating project folder", self._create_project_folder),
            Step("Initialising git repository", self._init_repository),
        ]

    def _create_project_folder(self, context):
        folder = context.opts.folder_name
        self._navigator.ensure_dir(folder)
        self._navigator.descend(folder)
        context.project_dir = self._navigator.cwd
        context.add_target = "."
        return f"Created {folder}"

    def _init_repository(self, context):
        context.branch_name = git_utils.DEFAULT_BRANCH
        if git_utils.is_git_repo(context.project_dir):
            context.flags["repo_present"] = True
            return "Git repository already present"
        self._shell.run(git_utils.init_command(git_utils.DEFAULT_BRANCH)).check()
        context.flags["repo_present"] = True
        return f"Initialised git repository on {git_utils.DEFAULT_BRANCH}"

    # --- Shared tail ---

    def _shared_steps(self, opts):
        return [
            Step("Writing .gitignore", self._files_step(boilerplate.IGNORE_FILES)),
            Step("Setting up npm package", self._setup_npm),
            Step("Setting up TypeScript", self._setup_typescript),
            Step("Adding lint and format config", self._files_step(boilerplate.LINT_FILES)),
            Step("Adding editor settings", self._files_step(boilerplate.EDITOR_FILES)),
            Step("Creating src and test folders", self._create_sources),
        ]

    def _files_step(self, files):
        def action(context):
            written = boilerplate.write_boilerplate(files, _template_variables(context))
            return "Wrote " + ", ".join(written)
        return action

    def _setup_npm(self, context):
        self._shell.run("npm init -y").check()
        update_config(PACKAGE_FILE, package_updates(context.opts.project_name))
        return "Installed via npm"

    def _setup_typescript(self, context):
        self._shell.run_with_fallback("tsc --version", "npm install -g typescript").check()
        if not os.path.isfile(COMPILER_CONFIG_FILE):
            self._shell.run(TSC_INIT_COMMAND).check()
        update_config(COMPILER_CONFIG_FILE, TSCONFIG_UPDATES, strip=True)
        return "Typescript initializer done"

    def _create_sources(self, context):
        boilerplate.write_boilerplate(boilerplate.SOURCE_FILES, _template_variables(context))
        self._shell.run("npm install --save-dev " + " ".join(DEV_DEPENDENCIES)).check()
        self._shell.run("npm run compile").check()
        self._shell.run("npm test").check()
        return "Source and test folders generated"

    def _commit(self, context):
        self._shell.run(git_utils.add_command(context.add_target)).check()
        if self._shell.run(git_utils.STAGED_CHANGES_COMMAND).ok:
            return "Nothing new to commit"
        self._shell.run(git_utils.commit_command(f"Set up {context.opts.project_name}")).check()
        return f"Committed {context.opts.folder_name}"

    def _restore(self, depth):
        def action(context):
            self._navigator.ascend_to(depth)
            context.install_path = os.path.join(self._navigator.cwd, context.opts.folder_name)
            self._navigator.leave_root()
            return f"Installed at {context.install_path}"
        return action


def _template_variables(context):
    return {
        "project_name": context.opts.project_name,
        "folder_name": context.opts.folder_name,
    }
