"""Default scoped-name generator."""

from __future__ import annotations

import re

_EXTENSION_RE = re.compile(r"\.[^./\\]+$")
_NON_WORD_RE = re.compile(r"[\W_]+")


def generate_scoped_name(name: str, path: str, css: str = "") -> str:
    """Return ``_<sanitised path>__<name>``.

    ``styles/button.css`` and ``name="primary"`` give
    ``_styles_button__primary``.  Deterministic for identical input.
    """
    sanitised = _NON_WORD_RE.sub("_", _EXTENSION_RE.sub("", path)).strip("_")
    return f"_{sanitised}__{name}"
