"""BuildConfig: immutable settings for tree construction.

The defaults reproduce the plain behaviour: ``"<selector>: <value>"`` leaf
labels, non-ASCII text kept as is, and no limit on nesting depth.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["BuildConfig"]


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Immutable configuration for TreeBuilder.

    Attributes:
        separator: Text placed between the selector and the scalar text of a
            leaf label.  Default ``": "``.
        max_depth: Deepest allowed node, counting top-level nodes as depth 1.
            ``None`` (default) means unlimited.  Exceeding it raises
            ``NestingDepthError``.
        ensure_ascii: Forwarded to the JSON encoder that renders scalar text.
            Default False.
    """

    separator: str = ": "
    max_depth: int | None = None
    ensure_ascii: bool = False

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            msg = f"max_depth must be None or >= 1, got {self.max_depth}"
            raise ValueError(msg)
