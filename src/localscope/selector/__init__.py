from localscope.selector.model import (
    Attribute,
    ClassName,
    Element,
    IdName,
    NestedPseudoClass,
    Operator,
    Other,
    PseudoClass,
    PseudoElement,
    Selector,
    SelectorNode,
    Selectors,
    Spacing,
    Universal,
)
from localscope.selector.parser import parse
from localscope.selector.serialize import stringify

__all__ = [
    "parse",
    "stringify",
    "Attribute",
    "ClassName",
    "Element",
    "IdName",
    "NestedPseudoClass",
    "Operator",
    "Other",
    "PseudoClass",
    "PseudoElement",
    "Selector",
    "SelectorNode",
    "Selectors",
    "Spacing",
    "Universal",
]
