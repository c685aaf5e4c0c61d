"""Errors raised by bootstrap steps and the pipeline that runs them."""
from __future__ import annotations

from typing import Iterable, List, Tuple


class BootstrapError(RuntimeError):
    """Base class for bootstrap failures."""


class MissingPrerequisite(BootstrapError):
    """A step needs an entity that an earlier step should have created."""


class SubStepFailures(BootstrapError):
    """One or more independent sub-operations of a step failed.

    Every sub-operation is allowed to settle before this is raised, so
    ``failures`` holds the complete set of ``(label, exception)`` pairs.
    """

    def __init__(self, step: str, failures: Iterable[Tuple[str, BaseException]]) -> None:
        self.step = step
        self.failures: List[Tuple[str, BaseException]] = list(failures)
        labels = ", ".join(label for label, _ in self.failures)
        super().__init__(
            f"{step}: {len(self.failures)} sub-operation(s) failed [{labels}]: {self.first}"
        )

    @property
    def first(self) -> BaseException:
        return self.failures[0][1]


class StepFailed(BootstrapError):
    """A pipeline step raised; later steps were not run."""

    def __init__(self, step: str, cause: BaseException) -> None:
        self.step = step
        self.cause = cause
        super().__init__(f"Bootstrap step '{step}' failed: {cause}")
