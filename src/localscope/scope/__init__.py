"""Scoping engine: localization, alias registry, rule walker and export composer."""

from localscope.scope.context import Mode, ModeContext
from localscope.scope.exports import ExportComposer, collect_exports
from localscope.scope.localize import localize_selector, localize_selectors
from localscope.scope.naming import generate_scoped_name
from localscope.scope.registry import AliasRegistry
from localscope.scope.transform import ScopeResult, ScopeTransform, process
from localscope.scope.walker import RuleWalker

__all__ = [
    "AliasRegistry",
    "ExportComposer",
    "Mode",
    "ModeContext",
    "RuleWalker",
    "ScopeResult",
    "ScopeTransform",
    "collect_exports",
    "generate_scoped_name",
    "localize_selector",
    "localize_selectors",
    "process",
]
