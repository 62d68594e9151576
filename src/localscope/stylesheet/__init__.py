from localscope.stylesheet.parser import parse_stylesheet
from localscope.stylesheet.model import AtRule, Declaration, Root, Rule, SourceSpan
from localscope.stylesheet.serialize import stringify

__all__ = [
    "parse_stylesheet",
    "stringify",
    "AtRule",
    "Declaration",
    "Root",
    "Rule",
    "SourceSpan",
]
