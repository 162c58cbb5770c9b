"""Block, time and message types shared by the contracts."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

SECONDS_PER_BLOCK = 5


@dataclass(frozen=True)
class BlockInfo:
    """The block a call runs in; ``time`` is in seconds."""

    height: int
    time: int
    chain_id: str = "testnet"

    def next(self) -> BlockInfo:
        """Return the following block."""
        return replace(self, height=self.height + 1, time=self.time + SECONDS_PER_BLOCK)


class ExpirationKind(Enum):
    AT_HEIGHT = "at_height"
    AT_TIME = "at_time"
    NEVER = "never"


@dataclass(frozen=True)
class Expiration:
    """A point in block height or time after which something has expired."""

    kind: ExpirationKind
    value: int = 0

    @classmethod
    def at_height(cls, height: int) -> Expiration:
        return cls(ExpirationKind.AT_HEIGHT, height)

    @classmethod
    def at_time(cls, seconds: int) -> Expiration:
        return cls(ExpirationKind.AT_TIME, seconds)

    @classmethod
    def never(cls) -> Expiration:
        return cls(ExpirationKind.NEVER)

    def is_expired(self, block: BlockInfo) -> bool:
        if self.kind is ExpirationKind.AT_HEIGHT:
            return block.height >= self.value
        if self.kind is ExpirationKind.AT_TIME:
            return block.time >= self.value
        return False

    def compare(self, other: Expiration) -> int | None:
        """Order two expirations: negative, zero or positive, or None if incomparable."""
        if self.kind is ExpirationKind.NEVER and other.kind is ExpirationKind.NEVER:
            return 0
        if self.kind is ExpirationKind.NEVER:
            return 1
        if other.kind is ExpirationKind.NEVER:
            return -1
        if self.kind is not other.kind:
            return None
        return (self.value > other.value) - (self.value < other.value)


class DurationUnit(Enum):
    HEIGHT = "height"
    TIME = "time"


@dataclass(frozen=True)
class Duration:
    """A span measured in blocks or in seconds."""

    unit: DurationUnit
    amount: int

    @classmethod
    def height(cls, blocks: int) -> Duration:
        return cls(DurationUnit.HEIGHT, blocks)

    @classmethod
    def time(cls, seconds: int) -> Duration:
        return cls(DurationUnit.TIME, seconds)

    def after(self, block: BlockInfo) -> Expiration:
        """The expiration reached this long after ``block``."""
        if self.unit is DurationUnit.HEIGHT:
            return Expiration.at_height(block.height + self.amount)
        return Expiration.at_time(block.time + self.amount)


@dataclass(frozen=True)
class Coin:
    amount: int
    denom: str


@dataclass(frozen=True)
class MessageInfo:
    """Who sent a call and which native funds came with it."""

    sender: str
    funds: tuple[Coin, ...] = ()


@dataclass(frozen=True)
class BankSend:
    to_address: str
    amount: tuple[Coin, ...]


@dataclass(frozen=True)
class WasmExecute:
    """A call to another contract, with its JSON-shaped message."""

    contract_addr: str
    msg: dict[str, Any]
    funds: tuple[Coin, ...] = ()


@dataclass
class Response:
    """Messages to dispatch and attributes describing what happened."""

    messages: list[Any] = field(default_factory=list)
    attributes: list[tuple[str, str]] = field(default_factory=list)

    def add_message(self, msg: Any) -> Response:
        self.messages.append(msg)
        return self

    def add_attribute(self, key: str, value: Any) -> Response:
        self.attributes.append((key, str(value)))
        return self

    def attribute(self, key: str) -> str:
        """Return the first value stored under ``key``."""
        for name, value in self.attributes:
            if name == key:
                return value
        raise KeyError(key)