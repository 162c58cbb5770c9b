# weightgov

Building blocks for weighted governance, held entirely in memory: a group of
weighted members whose weights can be read back at past block heights, the
voting thresholds a group can be held to, deposits for making proposals, and
the settings of a multisig backed by a group.

## Modules

- `weightgov.group`: `GroupContract` holds `Member` entries (address and
  weight), an optional admin and a list of hooks. `update_members` applies
  additions and then removals, and returns a `MemberChangedHookMsg`.
  `execute_update_members` does the same and returns a `Response` carrying one
  hook message for each registered hook. `query_member`, `query_total_weight`,
  `is_member` and `is_voting_member` take an optional `at_height`. A value
  saved at height `h` is visible from height `h + 1` on. Adding the same
  address twice in one call raises `DuplicateMember`.
  `validate_unique_members` and `update_members_message` are module functions.
- `weightgov.storage`: `SnapshotMap` and `SnapshotItem`, the stores that keep
  history by height.
- `weightgov.controllers`: `Admin`, `Hooks`, `MemberDiff` and
  `MemberChangedHookMsg`.
- `weightgov.threshold`: `AbsoluteCount`, `AbsolutePercentage` and
  `ThresholdQuorum`, each with `validate(total_weight)` and
  `to_response(total_weight)`, which returns a `ThresholdResponse`.
  Percentages are `decimal.Decimal` values.
- `weightgov.deposit`: `UncheckedDepositInfo.into_checked` validates a deposit
  and returns a `DepositInfo`. `DepositInfo` then checks a native payment and
  builds the messages that take a cw20 deposit and that return a deposit.
  `DenomKind` says whether a deposit is native or cw20.
- `weightgov.config`: `MultisigConfig` combines a threshold, a maximum voting
  period, a group, an optional `Executor` (`Executor.member()` or
  `Executor.only(addr)`) and an optional deposit. `authorize(sender)` raises
  `Unauthorized` when the sender may not execute.
- `weightgov.chain`: `BlockInfo` (`next()` moves one block and five seconds on),
  `Duration`, `Expiration`, `Coin`, `MessageInfo`, `BankSend`, `WasmExecute`
  and `Response`.
- `weightgov.errors`: `ContractError` and its subclasses. Two errors are equal
  when they have the same type and the same arguments.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from decimal import Decimal

from weightgov.chain import Coin, Duration, MessageInfo
from weightgov.config import Executor, MultisigConfig
from weightgov.deposit import DenomKind, UncheckedDepositInfo
from weightgov.errors import Unauthorized
from weightgov.group import GroupContract, Member
from weightgov.threshold import ThresholdQuorum

group = GroupContract(
    "group",
    admin="admin",
    members=[Member("alice", 1), Member("bob", 3)],
    height=100,
)
assert group.query_total_weight() == 4
assert group.query_total_weight(at_height=100) == 0
assert group.query_total_weight(at_height=101) == 4

group.update_members("admin", 105, add=[Member("carol", 2)], remove=["alice"])
assert group.query_member("alice") is None
assert group.query_member("alice", at_height=101) == 1

threshold = ThresholdQuorum(Decimal("0.51"), Decimal("0.33"))
threshold.validate(group.query_total_weight())

deposit = UncheckedDepositInfo(10, DenomKind.NATIVE, "ustake", True).into_checked()
deposit.check_native_deposit_paid(MessageInfo("bob", (Coin(10, "ustake"),)))

config = MultisigConfig(
    threshold, Duration.time(3600), group, Executor.only("bob"), deposit
)
config.authorize("bob")
try:
    config.authorize("carol")
except Unauthorized:
    pass
```

## What it does not do

This package has no multisig that stores proposals, records ballots, tallies
votes, or executes or closes proposals. It provides the group, thresholds,
deposits and configuration such a multisig would use, and errors such as
`NotOpen`, `AlreadyVoted` and `WrongExecuteStatus` are defined. Nothing in the
package runs a proposal through its lifecycle.

Nothing is persisted. All state lives in Python objects, and the package has
no command-line tool.