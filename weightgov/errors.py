"""Errors raised by the group and multisig contracts."""


class ContractError(Exception):
    """Base class of every contract error.

    Errors compare equal when they have the same type and the same arguments.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContractError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class _FixedMessageError(ContractError):
    message = ""

    def __init__(self) -> None:
        super().__init__(self.message)


class Unauthorized(_FixedMessageError):
    message = "Unauthorized"


class NotOpen(_FixedMessageError):
    message = "Proposal is not open"


class Expired(_FixedMessageError):
    message = "Proposal voting period has expired"


class NotExpired(_FixedMessageError):
    message = "Proposal must expire before you can close it"


class WrongExpiration(_FixedMessageError):
    message = "Wrong expiration option"


class AlreadyVoted(_FixedMessageError):
    message = "Already voted on this proposal"


class WrongExecuteStatus(_FixedMessageError):
    message = "Proposal must have passed and not yet been executed"


class WrongCloseStatus(_FixedMessageError):
    message = "Cannot close completed or passed proposals"


class NotAdmin(_FixedMessageError):
    message = "Caller is not admin"


class HookAlreadyRegistered(_FixedMessageError):
    message = "Given address already registered as a hook"


class HookNotRegistered(_FixedMessageError):
    message = "Given address not registered as a hook"


class InvalidThreshold(_FixedMessageError):
    message = "Invalid voting threshold percentage, must be in the 0.5-1.0 range"


class UnreachableWeight(_FixedMessageError):
    message = "Not possible to reach required (passing) weight"


class ZeroWeight(_FixedMessageError):
    message = "Required weight cannot be zero"


class InvalidCw20(_FixedMessageError):
    message = "Invalid cw20 token address"


class ZeroDeposit(_FixedMessageError):
    message = "Invalid zero deposit. Set the deposit to None to have no deposit."


class InvalidDeposit(_FixedMessageError):
    message = "Invalid native deposit amount"


class InvalidGroup(ContractError):
    """The group contract address could not be validated."""

    def __init__(self, addr: str) -> None:
        super().__init__(f"Group contract invalid address '{addr}'")
        self.addr = addr


class DuplicateMember(ContractError):
    """A member list named the same address twice."""

    def __init__(self, member: str) -> None:
        super().__init__(f"Message contained duplicate member: {member}")
        self.member = member


class Overflow(ContractError):
    """An arithmetic operation left the unsigned 64-bit range."""

    def __init__(self, operation: str, operand1: int, operand2: int) -> None:
        super().__init__(f"Cannot {operation} with {operand1} and {operand2}")
        self.operation = operation
        self.operand1 = operand1
        self.operand2 = operand2


class NotFound(ContractError):
    """A stored item that must exist was missing."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"{kind} not found")
        self.kind = kind