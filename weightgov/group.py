"""A group contract: an admin-managed set of weighted members."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Iterable

from .chain import Response, WasmExecute
from .controllers import Admin, Hooks, MemberChangedHookMsg, MemberDiff
from .errors import ContractError, DuplicateMember, Overflow
from .storage import SnapshotItem, SnapshotMap

DEFAULT_LIMIT = 10
MAX_LIMIT = 30
U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class Member:
    addr: str
    weight: int

    def __post_init__(self) -> None:
        if self.weight < 0:
            raise ValueError(f"member weight must not be negative: {self.weight}")


def validate_unique_members(members: Iterable[Member]) -> list[Member]:
    """Return the members sorted by address; raise if an address repeats."""
    ordered = sorted(members, key=lambda m: m.addr)
    for first, second in zip(ordered, ordered[1:]):
        if first.addr == second.addr:
            raise DuplicateMember(first.addr)
    return ordered


def update_members_message(
    contract_addr: str, remove: Iterable[str] = (), add: Iterable[Member] = ()
) -> WasmExecute:
    """The call asking a group contract to apply a membership change."""
    return WasmExecute(
        contract_addr,
        {
            "update_members": {
                "remove": list(remove),
                "add": [{"addr": m.addr, "weight": m.weight} for m in add],
            }
        },
    )


def _validate_addr(addr: str) -> str:
    if not addr or addr != addr.strip() or addr != addr.lower():
        raise ContractError(f"Invalid address: {addr!r}")
    return addr


def _checked_add(total: int, amount: int) -> int:
    result = total + amount
    if result > U64_MAX:
        raise Overflow("Add", total, amount)
    return result


def _checked_sub(total: int, amount: int) -> int:
    result = total - amount
    if result < 0:
        raise Overflow("Sub", total, amount)
    return result


_REMOVED = object()


class GroupContract:
    """Members with weights, their history by height, an admin and hooks."""

    def __init__(
        self,
        address: str,
        admin: str | None = None,
        members: Iterable[Member] = (),
        height: int = 0,
    ) -> None:
        ordered = validate_unique_members(members)
        self.address = address
        self._admin = Admin(None if admin is None else _validate_addr(admin))
        self._hooks = Hooks()
        self._members: SnapshotMap[str, int] = SnapshotMap()
        self._total: SnapshotItem[int] = SnapshotItem()

        total = 0
        for member in ordered:
            _validate_addr(member.addr)
            total = _checked_add(total, member.weight)
        for member in ordered:
            self._members.save(member.addr, member.weight, height)
        self._total.save(total, height)

    def update_members(
        self,
        sender: str,
        height: int,
        add: Iterable[Member] = (),
        remove: Iterable[str] = (),
    ) -> MemberChangedHookMsg:
        """Apply additions, then removals; only the admin may call this."""
        to_add = validate_unique_members(add)
        to_remove = list(remove)
        self._admin.assert_admin(sender)
        for addr in [m.addr for m in to_add] + to_remove:
            _validate_addr(addr)

        pending: dict[str, object] = {}

        def current(addr: str) -> int | None:
            value = pending.get(addr, self._members.may_load(addr))
            return None if value is _REMOVED else value  # type: ignore[return-value]

        total = self._total.may_load() or 0
        diffs: list[MemberDiff] = []
        for member in to_add:
            old = current(member.addr)
            total = _checked_sub(total, old or 0)
            total = _checked_add(total, member.weight)
            diffs.append(MemberDiff(member.addr, old, member.weight))
            pending[member.addr] = member.weight
        for addr in to_remove:
            old = current(addr)
            if old is not None:
                diffs.append(MemberDiff(addr, old, None))
                total = _checked_sub(total, old)
                pending[addr] = _REMOVED

        for addr, value in pending.items():
            if value is _REMOVED:
                self._members.remove(addr, height)
            else:
                self._members.save(addr, value, height)  # type: ignore[arg-type]
        self._total.save(total, height)
        return MemberChangedHookMsg(diffs)

    def execute_update_members(
        self,
        sender: str,
        height: int,
        add: Iterable[Member] = (),
        remove: Iterable[str] = (),
    ) -> Response:
        """Update members and notify every registered hook."""
        add = list(add)
        remove = list(remove)
        diff = self.update_members(sender, height, add, remove)
        response = Response()
        for message in self._hooks.prepare_hooks(diff.into_message):
            response.add_message(message)
        return (
            response.add_attribute("action", "update_members")
            .add_attribute("added", len(add))
            .add_attribute("removed", len(remove))
            .add_attribute("sender", sender)
        )

    def update_admin(self, sender: str, admin: str | None) -> Response:
        return self._admin.update(sender, None if admin is None else _validate_addr(admin))

    def add_hook(self, sender: str, addr: str) -> Response:
        return self._hooks.add_hook(self._admin, sender, _validate_addr(addr))

    def remove_hook(self, sender: str, addr: str) -> Response:
        return self._hooks.remove_hook(self._admin, sender, _validate_addr(addr))

    def query_member(self, addr: str, at_height: int | None = None) -> int | None:
        """The member's weight now, or at the start of ``at_height``."""
        addr = _validate_addr(addr)
        if at_height is None:
            return self._members.may_load(addr)
        return self._members.may_load_at_height(addr, at_height)

    def query_list_members(
        self, start_after: str | None = None, limit: int | None = None
    ) -> list[Member]:
        limit = min(DEFAULT_LIMIT if limit is None else limit, MAX_LIMIT)
        start = None if start_after is None else _validate_addr(start_after)
        return [Member(addr, weight) for addr, weight in self._members.range(start, limit)]

    def query_total_weight(self, at_height: int | None = None) -> int:
        if at_height is None:
            weight = self._total.may_load()
        else:
            weight = self._total.may_load_at_height(at_height)
        return weight or 0

    def query_admin(self) -> str | None:
        return self._admin.addr

    def query_hooks(self) -> list[str]:
        return list(self._hooks.hooks)

    def raw_total(self) -> bytes | None:
        """The stored total weight as JSON bytes."""
        value = self._total.may_load()
        return None if value is None else json.dumps(value).encode()

    def raw_member(self, addr: str) -> bytes | None:
        """The stored weight of ``addr`` as JSON bytes, or None if absent."""
        value = self._members.may_load(addr)
        return None if value is None else json.dumps(value).encode()

    def is_member(self, addr: str, at_height: int | None = None) -> int | None:
        return self.query_member(addr, at_height)

    def is_voting_member(self, addr: str, at_height: int | None = None) -> int | None:
        """The member's weight if it is at least one, else None."""
        weight = self.query_member(addr, at_height)
        return weight if weight is not None and weight >= 1 else None