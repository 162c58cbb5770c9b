import pytest

from weightgov.chain import Duration
from weightgov.config import Executor, ExecutorKind, MultisigConfig
from weightgov.errors import Unauthorized
from weightgov.group import GroupContract, Member
from weightgov.threshold import AbsoluteCount

OWNER = "admin0001"
VOTER1 = "voter0001"
VOTER2 = "voter0002"
VOTER3 = "voter0003"
VOTER4 = "voter0004"
VOTER5 = "voter0005"


def make_group() -> GroupContract:
    members = [
        Member(OWNER, 0),
        Member(VOTER1, 1),
        Member(VOTER2, 2),
        Member(VOTER3, 3),
        Member(VOTER4, 12),
        Member(VOTER5, 5),
    ]
    return GroupContract("group", admin=OWNER, members=members, height=1)


def make_config(executor=None) -> MultisigConfig:
    return MultisigConfig(
        threshold=AbsoluteCount(4),
        max_voting_period=Duration.time(2000000),
        group=make_group(),
        executor=executor,
    )


def test_group_addr_is_group_address():
    config = make_config()
    assert config.group_addr == "group"


def test_no_executor_allows_anyone():
    config = make_config()
    results = [config.authorize(sender) for sender in ("anyone", VOTER1, OWNER)]
    assert results == [None, None, None]
    assert config.executor is None


def test_member_executor_rejects_non_member():
    config = make_config(Executor.member())
    with pytest.raises(Unauthorized):
        config.authorize("anyone")


def test_member_executor_allows_members_even_with_zero_weight():
    config = make_config(Executor.member())
    assert config.group.is_member(OWNER) == 0
    assert config.authorize(OWNER) is None
    assert config.authorize(VOTER2) is None


def test_member_executor_uses_current_membership():
    config = make_config(Executor.member())
    config.group.update_members(OWNER, 5, remove=[VOTER3])
    with pytest.raises(Unauthorized):
        config.authorize(VOTER3)


def test_only_executor_allows_just_that_address():
    config = make_config(Executor.only(VOTER3))
    with pytest.raises(Unauthorized):
        config.authorize("anyone")
    with pytest.raises(Unauthorized):
        config.authorize(VOTER1)
    assert config.authorize(VOTER3) is None


def test_executor_constructors():
    assert Executor.member() == Executor(ExecutorKind.MEMBER)
    assert Executor.only(VOTER3).addr == VOTER3
    assert Executor.only(VOTER3) != Executor.only(VOTER1)


def test_executor_rejects_inconsistent_fields():
    with pytest.raises(ValueError):
        Executor(ExecutorKind.ONLY)
    with pytest.raises(ValueError):
        Executor(ExecutorKind.MEMBER, VOTER1)