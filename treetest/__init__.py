"""treetest: a small describe/test/expect framework (package initializer).

Re-exports the public helpers so callers can use
`from treetest import describe, test, expect, run`.

    describe("Math", lambda: test("addition works", lambda: expect(2 + 3).to_be(5)))
    asyncio.run(run())
"""
from .assertions import Expectation, expect, render_value, same_value
from .errors import RegistrationError, TestAssertionError
from .registry import Registry, Suite, TestCase, default_registry, describe, test
from .runner import RunResult, TestOutcome, describe_error, run, run_sync

__all__ = [
    'describe', 'test', 'expect', 'run', 'run_sync',
    'Registry', 'Suite', 'TestCase', 'default_registry',
    'Expectation', 'same_value', 'render_value',
    'RunResult', 'TestOutcome', 'describe_error',
    'TestAssertionError', 'RegistrationError',
]
