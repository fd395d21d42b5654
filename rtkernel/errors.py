"""
errors.py - Exception types raised by the kernel

Project: rtkernel
"""


class RtKernelError(Exception):
    """Base class for errors raised by the kernel."""


class DegenerateMatrixError(RtKernelError, ValueError):
    """Raised when inverting a matrix whose determinant is exactly zero."""


class PreconditionViolation(RtKernelError, IndexError):
    """Raised when a row or column index lies outside a matrix."""
