"""Execution pass over a registry's suite tree."""
from time import perf_counter
from typing import IO, List, Optional
import asyncio
import inspect
import logging
import sys
import traceback

from pydantic import BaseModel, Field, model_validator

from . import config
from .registry import Registry, Suite, TestCase, default_registry

logger = logging.getLogger(__name__)


class TestOutcome(BaseModel):
    """Result of one test within a run."""
    path: str
    passed: bool
    detail: Optional[str] = None  # failure text, None on success
    duration_s: float = 0.0


class RunResult(BaseModel):
    """Summary of one run() call."""
    total: int = Field(0, ge=0, description="Tests executed")
    passed: int = Field(0, ge=0)
    failed: int = Field(0, ge=0)
    outcomes: List[TestOutcome] = Field(default_factory=list)

    @model_validator(mode="after")
    def counts_add_up(self):
        if self.total != self.passed + self.failed:
            raise ValueError(
                f"total ({self.total}) must equal passed ({self.passed}) + failed ({self.failed})"
            )
        return self

    @property
    def ok(self) -> bool:
        return self.failed == 0


def describe_error(err: BaseException, tracebacks: bool = True) -> str:
    """Detail text for a failed test: traceback, else message, else repr."""
    if tracebacks and err.__traceback__ is not None:
        return "".join(traceback.format_exception(type(err), err, err.__traceback__)).rstrip()
    return str(err) or repr(err)


async def _call(fn) -> None:
    pending = fn()
    if inspect.isawaitable(pending):
        await pending


async def run(
    registry: Optional[Registry] = None,
    *,
    out: Optional[IO[str]] = None,
    err: Optional[IO[str]] = None,
    pass_glyph: Optional[str] = None,
    fail_glyph: Optional[str] = None,
    tracebacks: Optional[bool] = None,
) -> RunResult:
    """
    Run every registered test once and report each result.

    Child suites run before the suite's own tests, everything else in
    declaration order. Tests run one at a time; an awaitable returned by
    a test body is awaited before the next test starts. A failing test
    is reported and counted, and the run carries on.

    Passing lines and a clean summary go to `out` (stdout by default);
    failures and a summary with failures go to `err` (stderr).
    """
    registry = registry if registry is not None else default_registry
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    pass_glyph = config.PASS_GLYPH if pass_glyph is None else pass_glyph
    fail_glyph = config.FAIL_GLYPH if fail_glyph is None else fail_glyph
    tracebacks = config.SHOW_TRACEBACKS if tracebacks is None else tracebacks

    passed = 0
    failed = 0
    outcomes: List[TestOutcome] = []

    async def run_test(t: TestCase, path: List[str]) -> None:
        nonlocal passed, failed
        full_name = config.PATH_SEP.join(path + [t.name])
        logger.debug("running %s", full_name)
        t0 = perf_counter()
        try:
            await _call(t.fn)
        except (Exception, SystemExit) as e:
            failed += 1
            detail = describe_error(e, tracebacks)
            outcomes.append(TestOutcome(path=full_name, passed=False, detail=detail,
                                        duration_s=perf_counter() - t0))
            print(f"{fail_glyph} {full_name}", file=err)
            print(detail, file=err)
        else:
            passed += 1
            outcomes.append(TestOutcome(path=full_name, passed=True,
                                        duration_s=perf_counter() - t0))
            print(f"{pass_glyph} {full_name}", file=out)

    async def run_suite(suite: Suite, path: List[str]) -> None:
        next_path = path if suite is registry.root else path + [suite.name]
        logger.debug("entering suite %r", suite.name)

        for child in suite.suites:
            await run_suite(child, next_path)

        for t in suite.tests:
            await run_test(t, next_path)

    await run_suite(registry.root, [])

    result = RunResult(total=passed + failed, passed=passed, failed=failed, outcomes=outcomes)
    summary = f"\nTotal: {result.total}, Passed: {result.passed}, Failed: {result.failed}"
    print(summary, file=out if result.ok else err)
    logger.debug("run finished: %d passed, %d failed", passed, failed)
    return result


def run_sync(registry: Optional[Registry] = None, **kwargs) -> RunResult:
    """Blocking wrapper around run() for scripts without an event loop."""
    return asyncio.run(run(registry, **kwargs))
