from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchResult:
    action: str
    ok: bool
    error: Optional[str] = None


class CommandDispatcher(Protocol):
    """Execute an action identifier on behalf of the matcher."""

    def execute(self, action: str) -> DispatchResult: ...


@dataclass
class _Command:
    func: Callable[[], object]
    name: str


class CommandRegistry:
    """In-process command registry keyed by opaque identifiers."""

    def __init__(self) -> None:
        self._commands: Dict[str, _Command] = {}

    def register(self, command_id: str, func: Callable[[], object], *, name: str | None = None) -> None:
        self._commands[command_id] = _Command(func=func, name=name or command_id)

    def unregister(self, command_id: str) -> None:
        self._commands.pop(command_id, None)

    def __contains__(self, command_id: str) -> bool:
        return command_id in self._commands

    def catalog(self) -> Dict[str, str]:
        """Identifier to display name, in registration order."""

        return {command_id: cmd.name for command_id, cmd in self._commands.items()}

    def display_name(self, command_id: str) -> str:
        cmd = self._commands.get(command_id)
        return cmd.name if cmd else command_id

    def execute(self, action: str) -> DispatchResult:
        cmd = self._commands.get(action)
        if cmd is None:
            logger.warning("Unknown command: %s", action)
            return DispatchResult(action=action, ok=False, error=f"unknown command: {action}")

        try:
            cmd.func()
        except Exception as exc:
            logger.exception("Command %s failed", action)
            return DispatchResult(action=action, ok=False, error=str(exc))
        return DispatchResult(action=action, ok=True)
