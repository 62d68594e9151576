"""localscope model layer -- public type re-exports."""

from localscope.model.diagnostic import Diagnostic, Severity

__all__ = [
    "Severity",
    "Diagnostic",
]
