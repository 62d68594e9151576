"""Localization engine: rewrite one selector according to :local/:global rules.

Class and id selectors in local mode are wrapped as ``:local(.name)``;
functional markers are unwrapped, bare markers are removed after switching
the mode for the rest of their sequence.  Running the engine again on its
own output is a no-op.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

from localscope.errors import LocalizeError
from localscope.scope.context import Mode, ModeContext
from localscope.selector.model import (
    SCOPE_MARKERS,
    ClassName,
    IdName,
    NestedPseudoClass,
    Operator,
    PseudoClass,
    Selector,
    SelectorNode,
    Selectors,
    Spacing,
    is_marker,
    is_spacing,
)

__all__ = ["LocalCallback", "localize_selector", "localize_selectors"]

LocalCallback = Callable[[ClassName | IdName], None]


def _trim(nodes: list[SelectorNode]) -> list[SelectorNode]:
    start = 0
    end = len(nodes)
    while start < end and isinstance(nodes[start], Spacing):
        start += 1
    while end > start and isinstance(nodes[end - 1], Spacing):
        end -= 1
    return nodes[start:end]


def _check_marker(
    node: PseudoClass, nodes: list[SelectorNode], index: int, context: ModeContext
) -> None:
    if context.inside is not None:
        raise LocalizeError(
            f"A :{node.name} is not allowed inside of a :{context.inside.value}(...)"
        )
    if index != 0 and not is_spacing(nodes[index - 1]):
        raise LocalizeError(f"Missing whitespace before :{node.name}")
    if index != len(nodes) - 1 and not is_spacing(nodes[index + 1]):
        raise LocalizeError(f"Missing whitespace after :{node.name}")


def _localize_marker(
    node: NestedPseudoClass, context: ModeContext, on_local: LocalCallback | None
) -> tuple[list[SelectorNode], ModeContext]:
    if context.inside is not None:
        raise LocalizeError(
            f"A :{node.name}(...) is not allowed inside of a :{context.inside.value}(...)"
        )
    if len(node.nodes) != 1:
        raise LocalizeError(f"A :{node.name}(...) must contain exactly one selector")
    inner, inner_context = localize_selector(
        node.nodes[0], ModeContext.for_marker(Mode(node.name)), on_local
    )
    if inner_context.saw_local:
        context = context.with_local()
    return inner.nodes, context


def _localize_nested(
    node: NestedPseudoClass, context: ModeContext, on_local: LocalCallback | None
) -> tuple[NestedPseudoClass, ModeContext]:
    # Not a marker: the argument stays in the enclosing scope, but a mode
    # switch inside it must not leak out.
    arguments: list[Selector] = []
    for argument in node.nodes:
        localized, inner_context = localize_selector(
            argument, ModeContext(mode=context.mode, inside=context.inside), on_local
        )
        arguments.append(localized)
        if inner_context.saw_local:
            context = context.with_local()
    return replace(node, nodes=arguments), context


def localize_selector(
    selector: Selector,
    context: ModeContext,
    on_local: LocalCallback | None = None,
) -> tuple[Selector, ModeContext]:
    """Rewrite one selector sequence.

    Returns the rewritten selector together with the context as it stands
    at the end of the sequence (final mode, whether anything was localized).
    *on_local* is called with every class or id that gets localized.

    Raises:
        LocalizeError: a marker nested inside another marker, or a bare
            marker without whitespace on both sides.
    """
    nodes = selector.nodes
    result: list[SelectorNode] = []

    for index, node in enumerate(nodes):
        following = nodes[index + 1] if index + 1 < len(nodes) else None

        if isinstance(node, Spacing):
            result.append(Spacing("") if is_marker(following) else node)

        elif isinstance(node, Operator):
            result.append(replace(node, after="") if is_marker(following) else node)

        elif is_marker(node):
            assert isinstance(node, PseudoClass)
            _check_marker(node, nodes, index, context)
            context = context.switch(Mode(node.name))

        elif isinstance(node, NestedPseudoClass) and node.name in SCOPE_MARKERS:
            spliced, context = _localize_marker(node, context, on_local)
            result.extend(spliced)

        elif isinstance(node, NestedPseudoClass):
            nested, context = _localize_nested(node, context, on_local)
            result.append(nested)

        elif isinstance(node, (ClassName, IdName)) and context.mode is Mode.LOCAL:
            if on_local is not None:
                on_local(node)
            result.append(NestedPseudoClass("local", [Selector(nodes=[node])]))
            context = context.with_local()

        else:
            result.append(node)

    return replace(selector, nodes=_trim(result)), context


def localize_selectors(
    selectors: Selectors,
    mode: Mode = Mode.LOCAL,
    on_local: LocalCallback | None = None,
) -> tuple[Selectors, list[ModeContext]]:
    """Localize every comma-separated alternative with a fresh context.

    Returns the rewritten list and the final context of each alternative.
    """
    rewritten: list[Selector] = []
    contexts: list[ModeContext] = []
    for alternative in selectors.nodes:
        localized, context = localize_selector(alternative, ModeContext(mode=mode), on_local)
        rewritten.append(localized)
        contexts.append(context)
    return replace(selectors, nodes=rewritten), contexts
