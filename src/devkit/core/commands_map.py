#!/usr/bin/env python3
"""
Purpose:
    Implements the CommandsMap registry: an ordered, immutable-once-registered
    mapping from command name to `CommandSpec`, populated by explicit
    registration calls at startup.

    Commands are any object exposing `run(args: list[str]) -> int`. They are
    produced by a zero-argument factory, either supplied directly or resolved
    lazily from a 'package.module:Attribute' target on first use.
"""
from __future__ import annotations

import importlib
from typing import Any, Callable, Dict, Iterator, List, Optional, Protocol, Sequence

from pydantic import BaseModel, ConfigDict, Field

from devkit.core.annotated_types import CommandName, CommandDescription, CommandTarget


class Command(Protocol):
    """What a registered command's factory must produce."""

    def run(self, args: Sequence[str]) -> int:
        ...


CommandFactory = Callable[[], Command]


# --- Data model --- #

class CommandSpec(BaseModel):
    """
    Registry record for one subcommand.

    Fields
    ------
    name:
        Unique, case-sensitive command name (validated, never lowercased).
    description:
        One-line summary shown in the help listing.
    factory:
        Zero-argument callable returning an object with `run(args) -> int`.
    target:
        'package.module:Attribute' when registered lazily; informational.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: CommandName = Field(..., description="Command name (case-sensitive).")
    description: CommandDescription = Field(default="", description="Help listing summary.")
    factory: Callable[[], Any] = Field(..., description="Builds a runnable command.")
    target: CommandTarget = Field(default=None, description="Lazy import target, if any.")

    def instantiate(self) -> Command:
        """Build a fresh command instance."""
        return self.factory()


# --- Lazy loading --- #

def _lazy_factory(target: str) -> CommandFactory:
    """Return a factory that imports 'module:attr' only when called."""
    module_name, _, attr = target.partition(":")

    def factory() -> Command:
        module = importlib.import_module(module_name)
        return getattr(module, attr)()

    return factory


# --- Registry --- #

class CommandsMap:
    """
    Ordered registry of subcommands.

    Names are unique; lookup is an exact, case-sensitive match. Iteration and
    `names()` follow registration order (which is also the help order).
    """

    def __init__(self) -> None:
        self._specs: Dict[str, CommandSpec] = {}

    # --- Registration --- #

    def register(self, name: str, factory: CommandFactory, description: str = "") -> CommandSpec:
        """
        Register an eagerly-provided factory under `name`.

        Raises:
            ValueError: if `name` is already registered.
            pydantic.ValidationError: if `name` or `factory` is malformed.
        """
        return self._add(CommandSpec(name=name, description=description, factory=factory))

    def builtin(self, name: str, target: str, description: str = "") -> CommandSpec:
        """
        Register a command resolved lazily from `target` ('package.module:Attribute').
        The module is imported when the command is first instantiated.
        """
        spec = CommandSpec(
            name=name,
            description=description,
            factory=_lazy_factory(str(target).strip()),
            target=target,
        )
        return self._add(spec)

    def _add(self, spec: CommandSpec) -> CommandSpec:
        if spec.name in self._specs:
            raise ValueError(f"Command {spec.name!r} is already registered")
        self._specs[spec.name] = spec
        return spec

    # --- Query API --- #

    def get(self, name: str) -> Optional[CommandSpec]:
        """Return the spec registered under exactly `name`, or None."""
        return self._specs.get(name)

    def require(self, name: str) -> CommandSpec:
        """Return the spec for `name` or raise LookupError if not registered."""
        spec = self.get(name)
        if spec is None:
            raise LookupError(f"Command {name!r} not found")
        return spec

    def names(self) -> List[str]:
        """Command names in registration order."""
        return list(self._specs)

    def specs(self) -> List[CommandSpec]:
        """Command specs in registration order."""
        return list(self._specs.values())

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self.specs())

    def __len__(self) -> int:
        return len(self._specs)
