"""Named commands the desktop shell can dispatch to.

The registry only maps names to plain functions; the host window owns
invocation, argument collection and lifecycle.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Dict, List

from ..errors import CommandInvocationError, CommandRegistrationError, UnknownCommandError
from .commands import greet

logger = logging.getLogger(__name__)

Command = Callable[..., Any]


class CommandRegistry:
    def __init__(self) -> None:
        self._commands: Dict[str, Command] = {}

    def register(self, func: Command | None = None, *, name: str | None = None):
        """Register ``func`` under ``name`` (its ``__name__`` by default).

        Works as ``register(f)``, ``@register`` and ``@register(name="x")``.
        """

        def decorator(f: Command) -> Command:
            command_name = name or f.__name__
            if command_name in self._commands:
                raise CommandRegistrationError(f"Command already registered: {command_name}")
            self._commands[command_name] = f
            logger.debug("Registered command %s", command_name)
            return f

        if func is not None:
            return decorator(func)
        return decorator

    def names(self) -> List[str]:
        return sorted(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def invoke(self, name: str, /, **kwargs: Any) -> Any:
        try:
            command = self._commands[name]
        except KeyError:
            raise UnknownCommandError(name) from None
        try:
            inspect.signature(command).bind(**kwargs)
        except TypeError as exc:
            raise CommandInvocationError(f"Bad arguments for {name}: {exc}") from exc
        logger.debug("Invoking %s", name)
        return command(**kwargs)


def default_registry() -> CommandRegistry:
    registry = CommandRegistry()
    registry.register(greet)
    return registry
