import pytest

from weightgov.chain import BankSend, Coin, MessageInfo, WasmExecute
from weightgov.deposit import (
    DenomKind,
    DepositInfo,
    MissingDenom,
    MultipleDenoms,
    NoFunds,
    UncheckedDepositInfo,
)
from weightgov.errors import InvalidCw20, InvalidDeposit, ZeroDeposit

TOKEN_ADDR = "tokencontract"
FLEX_ADDR = "flexcontract"
VOTER4 = "voter0004"
OWNER = "admin0001"


def _tokens(addr: str) -> bool:
    return addr == TOKEN_ADDR


def native_deposit(refund: bool = True) -> DepositInfo:
    return UncheckedDepositInfo(10, DenomKind.NATIVE, "TOKEN", refund).into_checked()


def cw20_deposit() -> DepositInfo:
    return UncheckedDepositInfo(10, DenomKind.CW20, TOKEN_ADDR, True).into_checked(_tokens)


def test_zero_native_deposit_rejected():
    unchecked = UncheckedDepositInfo(0, DenomKind.NATIVE, "native", True)
    with pytest.raises(ZeroDeposit):
        unchecked.into_checked()


def test_zero_deposit_checked_before_token_address():
    unchecked = UncheckedDepositInfo(0, DenomKind.CW20, "notatoken", True)
    with pytest.raises(ZeroDeposit):
        unchecked.into_checked(_tokens)


def test_invalid_cw20_rejected():
    unchecked = UncheckedDepositInfo(1, DenomKind.CW20, "groupcontract", True)
    with pytest.raises(InvalidCw20):
        unchecked.into_checked(_tokens)


def test_cw20_without_checker_rejected():
    unchecked = UncheckedDepositInfo(1, DenomKind.CW20, TOKEN_ADDR, True)
    with pytest.raises(InvalidCw20):
        unchecked.into_checked()


def test_into_checked_keeps_fields():
    checked = cw20_deposit()
    assert checked == DepositInfo(10, DenomKind.CW20, TOKEN_ADDR, True)


def test_negative_amount_rejected():
    with pytest.raises(ValueError):
        UncheckedDepositInfo(-1, DenomKind.NATIVE, "TOKEN", True)


def test_native_deposit_paid_exactly():
    deposit = native_deposit()
    info = MessageInfo(VOTER4, (Coin(10, "TOKEN"),))
    assert deposit.check_native_deposit_paid(info) is None


def test_native_deposit_wrong_amount():
    deposit = native_deposit()
    with pytest.raises(InvalidDeposit):
        deposit.check_native_deposit_paid(MessageInfo(VOTER4, (Coin(9, "TOKEN"),)))


def test_native_deposit_no_funds():
    deposit = native_deposit()
    with pytest.raises(NoFunds):
        deposit.check_native_deposit_paid(MessageInfo(VOTER4))


def test_native_deposit_zero_coin_counts_as_no_funds():
    deposit = native_deposit()
    with pytest.raises(NoFunds):
        deposit.check_native_deposit_paid(MessageInfo(VOTER4, (Coin(0, "TOKEN"),)))


def test_native_deposit_wrong_denom():
    deposit = native_deposit()
    with pytest.raises(MissingDenom) as excinfo:
        deposit.check_native_deposit_paid(MessageInfo(VOTER4, (Coin(10, "BTC"),)))
    assert excinfo.value == MissingDenom("TOKEN")


def test_native_deposit_multiple_denoms():
    deposit = native_deposit()
    info = MessageInfo(VOTER4, (Coin(10, "TOKEN"), Coin(5, "BTC")))
    with pytest.raises(MultipleDenoms):
        deposit.check_native_deposit_paid(info)


def test_cw20_deposit_ignores_native_funds():
    deposit = cw20_deposit()
    assert deposit.check_native_deposit_paid(MessageInfo(VOTER4)) is None


def test_native_take_messages_empty():
    assert native_deposit().take_deposit_messages(VOTER4, FLEX_ADDR) == []


def test_cw20_take_message_transfers_to_contract():
    messages = cw20_deposit().take_deposit_messages(VOTER4, FLEX_ADDR)
    assert messages == [
        WasmExecute(
            TOKEN_ADDR,
            {"transfer_from": {"owner": VOTER4, "recipient": FLEX_ADDR, "amount": "10"}},
        )
    ]


def test_native_return_message():
    message = native_deposit().return_deposit_message(OWNER)
    assert message == BankSend(OWNER, (Coin(10, "TOKEN"),))


def test_cw20_return_message():
    message = cw20_deposit().return_deposit_message(VOTER4)
    assert message == WasmExecute(
        TOKEN_ADDR, {"transfer": {"recipient": VOTER4, "amount": "10"}}
    )


def test_take_and_return_move_same_amount():
    deposit = cw20_deposit()
    (taken,) = deposit.take_deposit_messages(VOTER4, FLEX_ADDR)
    returned = deposit.return_deposit_message(VOTER4)
    assert taken.msg["transfer_from"]["amount"] == returned.msg["transfer"]["amount"]
    assert taken.msg["transfer_from"]["owner"] == returned.msg["transfer"]["recipient"]


def test_refund_flag_preserved():
    assert native_deposit(refund=False).refund_failed_proposals is False
    assert native_deposit(refund=True).refund_failed_proposals is True