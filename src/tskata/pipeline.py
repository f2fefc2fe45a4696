"""StepPipeline: runs an ordered list of setup steps, stopping at the first failure."""

import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional, TextIO

from tskata.errors import CancelledByOperator, ScaffoldError, StepFailed


@dataclass
class Step:
    """One named unit of setup work.

    ``action`` receives the shared PipelineContext and returns a short status
    line; it raises to signal failure.
    """

    title: str
    action: Callable[["PipelineContext"], str]


@dataclass
class PipelineContext:
    """State shared by the steps of one scaffold run."""

    opts: object
    home_dir: str = ""
    project_dir: str = ""
    add_target: str = "."
    branch_name: str = ""
    install_path: Optional[str] = None
    flags: dict = field(default_factory=dict)


class StepPipeline:
    """Executes steps strictly in order and reports progress to ``output``."""

    def __init__(self, output: Optional[TextIO] = None):
        self._output = output or sys.stderr

    def run(self, steps: List[Step], context: PipelineContext) -> List[str]:
        """Run every step, returning their status lines.

        Raises:
            StepFailed: A step raised a ScaffoldError or OSError; later steps
                were not run.
            CancelledByOperator: Propagated unchanged from a step.
        """
        statuses = []
        for step in steps:
            print(f"◇ {step.title}...", file=self._output)
            try:
                status = step.action(context)
            except CancelledByOperator:
                raise
            except (ScaffoldError, OSError) as exc:
                print(f"✖ {step.title} failed", file=self._output)
                raise StepFailed(step.title, exc, statuses) from exc
            print(f"  {status}", file=self._output)
            statuses.append(status)
        return statuses
