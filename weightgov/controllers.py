"""Admin and membership-hook controllers, and the hook message."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, TypeVar

from .chain import Response, WasmExecute
from .errors import HookAlreadyRegistered, HookNotRegistered, NotAdmin

T = TypeVar("T")


class Admin:
    """Holds the one address allowed to change a contract, if any."""

    def __init__(self, addr: str | None = None) -> None:
        self._addr = addr

    @property
    def addr(self) -> str | None:
        return self._addr

    def set(self, addr: str | None) -> None:
        self._addr = addr

    def is_admin(self, addr: str) -> bool:
        return self._addr is not None and self._addr == addr

    def assert_admin(self, sender: str) -> None:
        if not self.is_admin(sender):
            raise NotAdmin()

    def update(self, sender: str, new_admin: str | None) -> Response:
        """Hand the admin role to ``new_admin``; only the admin may do this."""
        self.assert_admin(sender)
        self._addr = new_admin
        return (
            Response()
            .add_attribute("action", "update_admin")
            .add_attribute("admin", new_admin if new_admin is not None else "None")
            .add_attribute("sender", sender)
        )


class Hooks:
    """Addresses informed of every membership change, in registration order."""

    def __init__(self) -> None:
        self._hooks: list[str] = []

    @property
    def hooks(self) -> tuple[str, ...]:
        return tuple(self._hooks)

    def add_hook(self, admin: Admin, sender: str, addr: str) -> Response:
        admin.assert_admin(sender)
        if addr in self._hooks:
            raise HookAlreadyRegistered()
        self._hooks.append(addr)
        return (
            Response()
            .add_attribute("action", "add_hook")
            .add_attribute("hook", addr)
            .add_attribute("sender", sender)
        )

    def remove_hook(self, admin: Admin, sender: str, addr: str) -> Response:
        admin.assert_admin(sender)
        if addr not in self._hooks:
            raise HookNotRegistered()
        self._hooks.remove(addr)
        return (
            Response()
            .add_attribute("action", "remove_hook")
            .add_attribute("hook", addr)
            .add_attribute("sender", sender)
        )

    def prepare_hooks(self, build: Callable[[str], T]) -> list[T]:
        """Build one message per registered hook."""
        return [build(hook) for hook in self._hooks]


@dataclass(frozen=True)
class MemberDiff:
    """A member's weight before and after a change; None means not a member."""

    key: str
    old: int | None
    new: int | None


@dataclass(frozen=True)
class MemberChangedHookMsg:
    diffs: tuple[MemberDiff, ...]

    def __init__(self, diffs: Iterable[MemberDiff]) -> None:
        object.__setattr__(self, "diffs", tuple(diffs))

    def into_message(self, contract_addr: str) -> WasmExecute:
        """The call that tells ``contract_addr`` about these changes."""
        body: dict[str, Any] = {
            "member_changed_hook": {
                "diffs": [{"key": d.key, "old": d.old, "new": d.new} for d in self.diffs]
            }
        }
        return WasmExecute(contract_addr, body)