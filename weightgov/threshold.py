"""Voting thresholds: how much weight a proposal needs to pass."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

from .errors import ContractError, InvalidThreshold, UnreachableWeight, ZeroWeight

_HALF = Decimal("0.5")
_ONE = Decimal(1)


class ZeroQuorumThreshold(ContractError):
    """The quorum was set to zero."""

    def __init__(self) -> None:
        super().__init__("Required quorum threshold cannot be zero")


class UnreachableQuorumThreshold(ContractError):
    """The quorum was set above one hundred percent."""

    def __init__(self) -> None:
        super().__init__("Not possible to reach required quorum threshold")


def _as_decimal(value: Decimal | int | str) -> Decimal:
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def _validate_percentage(percentage: Decimal) -> None:
    if percentage > _ONE or percentage < _HALF:
        raise InvalidThreshold()


def _validate_quorum(quorum: Decimal) -> None:
    if quorum == 0:
        raise ZeroQuorumThreshold()
    if quorum > _ONE:
        raise UnreachableQuorumThreshold()


class ThresholdKind(Enum):
    ABSOLUTE_COUNT = "absolute_count"
    ABSOLUTE_PERCENTAGE = "absolute_percentage"
    THRESHOLD_QUORUM = "threshold_quorum"


@dataclass(frozen=True)
class ThresholdResponse:
    """A threshold as reported to clients, together with the total weight."""

    kind: ThresholdKind
    total_weight: int
    weight: int | None = None
    percentage: Decimal | None = None
    threshold: Decimal | None = None
    quorum: Decimal | None = None


@dataclass(frozen=True)
class AbsoluteCount:
    """A fixed amount of yes weight passes a proposal."""

    weight: int

    def validate(self, total_weight: int) -> None:
        if self.weight == 0:
            raise ZeroWeight()
        if self.weight > total_weight:
            raise UnreachableWeight()

    def to_response(self, total_weight: int) -> ThresholdResponse:
        return ThresholdResponse(
            ThresholdKind.ABSOLUTE_COUNT, total_weight, weight=self.weight
        )


@dataclass(frozen=True)
class AbsolutePercentage:
    """A share of the total weight, between one half and one, must vote yes."""

    percentage: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "percentage", _as_decimal(self.percentage))

    def validate(self, total_weight: int) -> None:
        _validate_percentage(self.percentage)

    def to_response(self, total_weight: int) -> ThresholdResponse:
        return ThresholdResponse(
            ThresholdKind.ABSOLUTE_PERCENTAGE, total_weight, percentage=self.percentage
        )


@dataclass(frozen=True)
class ThresholdQuorum:
    """A share of cast votes must be yes, once a quorum of weight has voted."""

    threshold: Decimal
    quorum: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "threshold", _as_decimal(self.threshold))
        object.__setattr__(self, "quorum", _as_decimal(self.quorum))

    def validate(self, total_weight: int) -> None:
        _validate_percentage(self.threshold)
        _validate_quorum(self.quorum)

    def to_response(self, total_weight: int) -> ThresholdResponse:
        return ThresholdResponse(
            ThresholdKind.THRESHOLD_QUORUM,
            total_weight,
            threshold=self.threshold,
            quorum=self.quorum,
        )


Threshold = Union[AbsoluteCount, AbsolutePercentage, ThresholdQuorum]