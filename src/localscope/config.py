from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

NameGenerator = Callable[[str, str, str], str]

MODES = ("local", "global", "pure")


@dataclass(frozen=True)
class ScopeConfig:
    """Options for one scoping pass.

    ``mode="pure"`` scopes like ``"local"`` and additionally rejects rules
    in which no alternative contains a local class or id.
    """

    mode: str = "local"  # "local", "global" or "pure"
    generate_scoped_name: NameGenerator | None = None
    from_path: str = ""  # source file path forwarded to the name generator

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(
                f"Invalid mode {self.mode!r}; expected one of {', '.join(MODES)}"
            )

    @property
    def default_mode(self) -> str:
        """The scoping mode a selector starts in."""
        return "global" if self.mode == "global" else "local"

    @property
    def pure(self) -> bool:
        return self.mode == "pure"

    @classmethod
    def from_options(cls, options: dict[str, Any] | None = None) -> ScopeConfig:
        """Build a config from plugin-style option names.

        Accepts ``mode``, ``generateScopedName`` (or ``generate_scoped_name``)
        and ``from``.
        """
        options = dict(options or {})
        generator = options.get("generateScopedName", options.get("generate_scoped_name"))
        return cls(
            mode=options.get("mode") or "local",
            generate_scoped_name=generator,
            from_path=options.get("from") or options.get("from_path") or "",
        )
