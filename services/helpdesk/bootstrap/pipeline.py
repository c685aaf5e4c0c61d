"""Ordered step execution and bounded fan-out for the startup bootstrap."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Sequence, Tuple, TypeVar

from django.conf import settings
from django.db import connections

from .exceptions import StepFailed, SubStepFailures

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class BootstrapContext:
    """Configuration snapshot handed to every step."""

    app_root: Path
    max_workers: int = 1
    default_timezone: str = "America/New_York"
    elasticsearch: Mapping[str, Any] = field(default_factory=dict)
    database_version: str = "16.2"
    backup_tools_url: str = ""
    backup_tools_timeout: float = 60.0

    @classmethod
    def from_settings(cls) -> "BootstrapContext":
        return cls(
            app_root=Path(settings.APP_ROOT),
            max_workers=int(settings.BOOTSTRAP_MAX_WORKERS),
            default_timezone=settings.BOOTSTRAP_DEFAULT_TIMEZONE,
            elasticsearch=dict(settings.ELASTICSEARCH),
            database_version=settings.DATABASE_VERSION,
            backup_tools_url=settings.BACKUP_TOOLS_URL,
            backup_tools_timeout=float(settings.BACKUP_TOOLS_TIMEOUT),
        )


@dataclass(frozen=True)
class Step:
    name: str
    run: Callable[[BootstrapContext], Any]


@dataclass
class BootstrapReport:
    """Outcome of a pipeline run: completed steps, their results, and the failure if any."""

    completed: List[str] = field(default_factory=list)
    results: Dict[str, Any] = field(default_factory=dict)
    failed_step: str | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def timezone(self) -> str | None:
        return self.results.get("seed_timezone")

    def as_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "completed": list(self.completed),
            "failedStep": self.failed_step,
            "error": str(self.error) if self.error is not None else None,
            "timezone": self.timezone,
        }


class Pipeline:
    """Run steps in order, stopping at the first one that raises."""

    def __init__(self, steps: Iterable[Step]) -> None:
        self.steps: Tuple[Step, ...] = tuple(steps)

    def run(self, context: BootstrapContext, report: BootstrapReport | None = None) -> BootstrapReport:
        report = report if report is not None else BootstrapReport()
        for step in self.steps:
            logger.debug("Running bootstrap step %s", step.name)
            try:
                result = step.run(context)
            except Exception as exc:
                report.failed_step = step.name
                report.error = exc
                raise StepFailed(step.name, exc) from exc
            report.completed.append(step.name)
            report.results[step.name] = result
        return report


def _run_in_worker(operation: Callable[[], T]) -> T:
    try:
        return operation()
    finally:
        # Each worker thread gets its own database connections.
        connections.close_all()


def fan_out(
    step: str,
    operations: Sequence[Tuple[str, Callable[[], T]]],
    *,
    max_workers: int,
) -> Dict[str, T]:
    """Run independent operations and wait until every one has settled.

    Operations run on a thread pool of at most ``max_workers`` threads, or
    inline when ``max_workers`` is 1 or there is a single operation. A failing
    operation never prevents the others from running; once all have finished,
    the failures are raised together as :class:`SubStepFailures`.
    """

    results: Dict[str, T] = {}
    failures: List[Tuple[str, BaseException]] = []

    if max_workers <= 1 or len(operations) <= 1:
        for label, operation in operations:
            try:
                results[label] = operation()
            except Exception as exc:
                logger.warning("%s: %s failed: %s", step, label, exc)
                failures.append((label, exc))
    else:
        with ThreadPoolExecutor(
            max_workers=min(max_workers, len(operations)),
            thread_name_prefix=f"bootstrap-{step}",
        ) as executor:
            futures = [
                (label, executor.submit(_run_in_worker, operation))
                for label, operation in operations
            ]
            for label, future in futures:
                try:
                    results[label] = future.result()
                except Exception as exc:
                    logger.warning("%s: %s failed: %s", step, label, exc)
                    failures.append((label, exc))

    if failures:
        raise SubStepFailures(step, failures)
    return results
