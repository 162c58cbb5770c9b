"""Configuration of a multisig, and who may execute its passed proposals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .chain import Duration
from .deposit import DepositInfo
from .errors import Unauthorized
from .group import GroupContract
from .threshold import Threshold


class ExecutorKind(Enum):
    MEMBER = "member"
    ONLY = "only"


@dataclass(frozen=True)
class Executor:
    """Who may execute passed proposals.

    ``MEMBER`` allows any member of the voting group, even with zero weight;
    ``ONLY`` allows just the given address.
    """

    kind: ExecutorKind
    addr: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is ExecutorKind.ONLY and self.addr is None:
            raise ValueError("an ONLY executor needs an address")
        if self.kind is ExecutorKind.MEMBER and self.addr is not None:
            raise ValueError("a MEMBER executor takes no address")

    @classmethod
    def member(cls) -> Executor:
        return cls(ExecutorKind.MEMBER)

    @classmethod
    def only(cls, addr: str) -> Executor:
        return cls(ExecutorKind.ONLY, addr)


@dataclass
class MultisigConfig:
    """Settings of a multisig backed by a group contract."""

    threshold: Threshold
    max_voting_period: Duration
    group: GroupContract
    executor: Optional[Executor] = None
    proposal_deposit: Optional[DepositInfo] = None

    @property
    def group_addr(self) -> str:
        return self.group.address

    def authorize(self, sender: str) -> None:
        """Raise Unauthorized unless ``sender`` may execute passed proposals.

        With no executor set, everyone is allowed.
        """
        executor = self.executor
        if executor is None:
            return
        if executor.kind is ExecutorKind.MEMBER:
            if self.group.is_member(sender) is None:
                raise Unauthorized()
        elif executor.addr != sender:
            raise Unauthorized()