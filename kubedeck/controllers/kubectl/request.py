"""kubectl request shape."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class KubectlRequest:
    """One kubectl invocation, before context and timeout flags are added.

    Attributes:
        verb: Subcommand words, e.g. ``("get",)`` or ``("top", "pod")``.
        kind: Resource kind for get/describe, empty otherwise.
        name: Resource name, empty for list queries.
        flags: Flag name to value, rendered as ``--name=value``.
        namespace: Namespace override, empty for the ambient namespace.
    """

    verb: tuple[str, ...]
    kind: str = ""
    name: str = ""
    flags: Mapping[str, str] = field(default_factory=dict)
    namespace: str = ""

    def to_args(self) -> tuple[str, ...]:
        args: list[str] = list(self.verb)
        if self.kind:
            args.append(self.kind)
        if self.name:
            args.append(self.name)
        if self.namespace:
            args.extend(["--namespace", self.namespace])
        args.extend(f"--{key}={value}" for key, value in self.flags.items())
        return tuple(args)


__all__ = ["KubectlRequest"]
