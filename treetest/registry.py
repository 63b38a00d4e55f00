"""Suite tree and the describe/test registration API.

Registration only records things. Nothing registered here runs until
`treetest.runner.run` walks the tree, so the same tree can be run any
number of times.
"""
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Iterator, List, Optional, Union
import inspect
import logging

from .config import ROOT_NAME
from .errors import RegistrationError

logger = logging.getLogger(__name__)

TestFn = Callable[[], Union[None, Awaitable[None]]]


@dataclass
class TestCase:
    """A named test body, owned by exactly one suite."""
    __test__ = False

    name: str
    fn: TestFn


@dataclass
class Suite:
    """A named group of child suites and tests, both in declaration order."""
    name: str
    suites: List["Suite"] = field(default_factory=list)
    tests: List[TestCase] = field(default_factory=list)


def _check_registration(kind: str, name, fn) -> None:
    if not isinstance(name, str):
        raise RegistrationError(f"{kind} name must be a str, got {type(name).__name__}")
    if not callable(fn):
        raise RegistrationError(f"{kind} {name!r} needs a callable, got {type(fn).__name__}")


class Registry:
    """One test universe: a root suite plus the registration cursor.

    The cursor is a stack of open suites. Its top is where `describe`
    and `test` attach new nodes, and it always holds at least the root.
    """

    def __init__(self):
        self.root = Suite(ROOT_NAME)
        self._stack: List[Suite] = [self.root]

    @property
    def current(self) -> Suite:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        """Number of open describe scopes (0 at top level)."""
        return len(self._stack) - 1

    @contextmanager
    def _open(self, suite: Suite) -> Iterator[Suite]:
        self._stack.append(suite)
        try:
            yield suite
        finally:
            self._stack.pop()

    def describe(self, name: str, fn: Callable[[], None]) -> None:
        """Group the tests registered by `fn` under `name`.

        `fn` is called immediately with no arguments. Errors it raises
        propagate to the caller once the cursor is restored. Callbacks
        must be synchronous: one that returns an awaitable raises
        RegistrationError, because its registrations could land after
        the scope has closed.
        """
        _check_registration("describe", name, fn)
        suite = Suite(name)
        self.current.suites.append(suite)
        logger.debug("suite registered: %r (depth %d)", name, self.depth + 1)

        with self._open(suite):
            pending = fn()
            if inspect.isawaitable(pending):
                if inspect.iscoroutine(pending):
                    pending.close()
                raise RegistrationError(
                    f"describe({name!r}) callback returned an awaitable; "
                    "suite callbacks must register tests synchronously"
                )

    def test(self, name: str, fn: TestFn) -> None:
        """Attach a test to the innermost open suite (the root at top level)."""
        _check_registration("test", name, fn)
        self.current.tests.append(TestCase(name, fn))
        logger.debug("test registered: %r in %r", name, self.current.name)

    def count_tests(self, suite: Optional[Suite] = None) -> int:
        suite = suite or self.root
        return len(suite.tests) + sum(self.count_tests(s) for s in suite.suites)


default_registry = Registry()


def describe(name: str, fn: Callable[[], None]) -> None:
    """Register a suite on the process-wide default registry."""
    default_registry.describe(name, fn)


def test(name: str, fn: TestFn) -> None:
    """Register a test on the process-wide default registry."""
    default_registry.test(name, fn)


test.__test__ = False
