"""
Domain exceptions for the savings bank business logic

Every failure surfaces as its own exception class so callers can branch on
the condition. `code` carries the condition name used on the wire.
The category base classes mirror how the condition is treated:

- validation: rejected before any mutation
- authorization: caller lacks the role or the unit
- lifecycle: deposit/unit is in the wrong state for the call
- resource: not enough balance/allowance; the whole operation is rejected
- operational: blanket rejection (pause switch)
"""


class SavingBankError(Exception):
    """Base exception for all savings bank domain errors"""
    code = 'SavingBankError'

    def __init__(self, message=None, **details):
        self.details = details
        super().__init__(message or self.code)


class SavingBankValidationError(SavingBankError):
    """Raised when input fails plan or amount validation"""
    code = 'ValidationError'


class SavingBankAuthorizationError(SavingBankError):
    """Raised when the caller is not allowed to perform the operation"""
    code = 'AuthorizationError'


class SavingBankLifecycleError(SavingBankError):
    """Raised when a record is not in a state that allows the operation"""
    code = 'LifecycleError'


class SavingBankResourceError(SavingBankError):
    """Raised when balances are insufficient to complete the operation"""
    code = 'ResourceError'


class SavingBankOperationalError(SavingBankError):
    """Raised by operational switches such as pause"""
    code = 'OperationalError'


# Validation

class PlanNotFoundError(SavingBankValidationError):
    code = 'PlanNotFound'


class PlanNotActiveError(SavingBankValidationError):
    code = 'PlanNotActive'


class InvalidAmountError(SavingBankValidationError):
    code = 'InvalidAmount'


class InvalidTermError(SavingBankValidationError):
    code = 'InvalidTerm'


class InvalidPlanError(SavingBankValidationError):
    code = 'InvalidPlan'


# Authorization

class NotAdminError(SavingBankAuthorizationError):
    code = 'NotAdmin'


class NotOwnerError(SavingBankAuthorizationError):
    code = 'NotOwner'


class UnauthorizedCallerError(SavingBankAuthorizationError):
    """Raised when a component is called by someone other than its bound caller"""
    code = 'UnauthorizedCaller'


class NotApprovedOrOwnerError(SavingBankAuthorizationError):
    """Raised when a unit transfer/approval is attempted by a non-holder, non-approved address"""
    code = 'NotApprovedOrOwner'


# Lifecycle

class DepositNotFoundError(SavingBankLifecycleError):
    code = 'DepositNotFound'


class DepositClosedError(SavingBankLifecycleError):
    code = 'DepositClosed'


class DepositNotMatureError(SavingBankLifecycleError):
    code = 'DepositNotMature'


class DepositTransitionError(SavingBankLifecycleError):
    """Raised when a deposit state transition is not allowed"""
    code = 'DepositTransition'


class UnitNotFoundError(SavingBankLifecycleError):
    code = 'UnitNotFound'


class UnitAlreadyExistsError(SavingBankLifecycleError):
    code = 'UnitAlreadyExists'


class IncorrectOwnerError(SavingBankLifecycleError):
    code = 'IncorrectOwner'


class AlreadyBoundError(SavingBankLifecycleError):
    code = 'AlreadyBound'


# Resource

class InsufficientBalanceError(SavingBankResourceError):
    """Vault liquidity is below the requested payment"""
    code = 'InsufficientBalance'


class InsufficientFundsError(SavingBankResourceError):
    """An asset holder's balance is below the requested transfer"""
    code = 'InsufficientFunds'


class InsufficientAllowanceError(SavingBankResourceError):
    code = 'InsufficientAllowance'


# Operational

class EnforcedPauseError(SavingBankOperationalError):
    code = 'EnforcedPause'


class ExpectedPauseError(SavingBankOperationalError):
    code = 'ExpectedPause'
