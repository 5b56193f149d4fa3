"""
Error Types
===========
Typed failures raised by the star generation pipeline.

The core never terminates the process. Callers (the batch driver, the CLI)
decide whether a failure skips one radius or aborts the whole run.

Classes:
    StarpadError: Common base class.
    InvalidParameter: A physical or derived parameter is out of range.
    InconsistentSampling: Derived sample counts do not agree with each other.
    MalformedInput: The parameter stream cannot be parsed.
"""


class StarpadError(Exception):
    """Base class for all errors raised by starpad."""


class InvalidParameter(StarpadError, ValueError):
    """A precondition on the input parameters is violated."""


class InconsistentSampling(StarpadError, RuntimeError):
    """
    Internal consistency check failed (e.g. Kappa < K or a wrong point count).
    Indicates a problem in the derived-parameter computation, not bad input.
    """


class MalformedInput(StarpadError, ValueError):
    """The parameter file is short or contains a non-numeric token."""

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position
