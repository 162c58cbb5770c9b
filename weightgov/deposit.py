"""Proposal deposits: what a proposer pays, and how it is taken and returned."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from .chain import BankSend, Coin, MessageInfo, WasmExecute
from .errors import ContractError, InvalidCw20, InvalidDeposit, ZeroDeposit


class PaymentError(ContractError):
    """The native funds sent with a call were not the expected payment."""


class NoFunds(PaymentError):
    def __init__(self) -> None:
        super().__init__("No funds sent")


class MultipleDenoms(PaymentError):
    def __init__(self) -> None:
        super().__init__("Sent more than one denomination")


class MissingDenom(PaymentError):
    def __init__(self, denom: str) -> None:
        super().__init__(f"Must send reserve token '{denom}'")
        self.denom = denom


class DenomKind(Enum):
    """Whether a deposit is paid in a native coin or a cw20 token."""

    NATIVE = "native"
    CW20 = "cw20"


def must_pay(info: MessageInfo, denom: str) -> int:
    """Return the amount of ``denom`` sent, requiring exactly one non-zero coin of it."""
    if not info.funds:
        raise NoFunds()
    if len(info.funds) > 1:
        raise MultipleDenoms()
    (coin,) = info.funds
    if coin.amount == 0:
        raise NoFunds()
    if coin.denom != denom:
        raise MissingDenom(denom)
    return coin.amount


def _check_amount(amount: int) -> None:
    if amount < 0:
        raise ValueError(f"deposit amount must not be negative: {amount}")


@dataclass(frozen=True)
class DepositInfo:
    """A validated deposit requirement."""

    amount: int
    kind: DenomKind
    denom: str
    refund_failed_proposals: bool

    def __post_init__(self) -> None:
        _check_amount(self.amount)

    def check_native_deposit_paid(self, info: MessageInfo) -> None:
        """Raise unless a native deposit was sent in full with the call."""
        if self.kind is not DenomKind.NATIVE:
            return
        if must_pay(info, self.denom) != self.amount:
            raise InvalidDeposit()

    def take_deposit_messages(self, sender: str, contract: str) -> list[WasmExecute]:
        """Messages moving a cw20 deposit from ``sender`` to ``contract``.

        Native deposits arrive with the call itself, so none are needed for them.
        """
        if self.kind is not DenomKind.CW20:
            return []
        body: dict[str, Any] = {
            "transfer_from": {
                "owner": sender,
                "recipient": contract,
                "amount": str(self.amount),
            }
        }
        return [WasmExecute(self.denom, body)]

    def return_deposit_message(self, proposer: str) -> BankSend | WasmExecute:
        """The message paying the deposit back to ``proposer``."""
        if self.kind is DenomKind.NATIVE:
            return BankSend(proposer, (Coin(self.amount, self.denom),))
        body: dict[str, Any] = {
            "transfer": {"recipient": proposer, "amount": str(self.amount)}
        }
        return WasmExecute(self.denom, body)


@dataclass(frozen=True)
class UncheckedDepositInfo:
    """A deposit requirement as given by a user, not yet validated."""

    amount: int
    kind: DenomKind
    denom: str
    refund_failed_proposals: bool

    def __post_init__(self) -> None:
        _check_amount(self.amount)

    def into_checked(
        self, is_token_contract: Optional[Callable[[str], bool]] = None
    ) -> DepositInfo:
        """Validate the deposit.

        ``is_token_contract`` tells whether an address is a cw20 token contract;
        without it no cw20 address is accepted.
        """
        if self.amount == 0:
            raise ZeroDeposit()
        if self.kind is DenomKind.CW20:
            if is_token_contract is None or not is_token_contract(self.denom):
                raise InvalidCw20()
        return DepositInfo(
            amount=self.amount,
            kind=self.kind,
            denom=self.denom,
            refund_failed_proposals=self.refund_failed_proposals,
        )