"""
Errors raised at the pipeline's caller boundary.

Both are programming errors: the caller used the pipeline wrongly and
should fix the call, not retry it. A frame with no hand in it is NOT an
error, it simply yields an empty overlay.
"""


class PreconditionViolation(RuntimeError):
    """Pipeline called in the wrong state or with invalid parameters."""


class DimensionMismatch(PreconditionViolation):
    """Frame or buffer size does not match the active session."""
