"""Error types raised by treetest itself."""


class TestAssertionError(AssertionError):
    """Raised by a matcher when the actual value does not meet the expectation."""

    __test__ = False


class RegistrationError(TypeError):
    """Raised by describe/test when a registration cannot be accepted."""
