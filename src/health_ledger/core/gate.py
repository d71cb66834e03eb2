"""Operation gate: the allow/deny decision taken before any mutation."""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .result import ErrorCode

GrantCheck = Callable[[str, str], bool]


@dataclass(frozen=True)
class Decision:
    """Outcome of :func:`authorize`.

    ``rule`` names the rule that allowed the call (``self``, ``grant``,
    ``owner`` or ``privileged``) or is ``denied``.
    """

    allowed: bool
    rule: str
    error: Optional[ErrorCode] = None

    def __bool__(self) -> bool:
        return self.allowed


def authorize(
    caller: str,
    *,
    principal: Optional[str] = None,
    grants: Optional[GrantCheck] = None,
    owner: Optional[str] = None,
    privileged: Iterable[str] = (),
    deny_with: ErrorCode = ErrorCode.NOT_FOUND,
) -> Decision:
    """Decide whether ``caller`` may perform an operation.

    Rules are tried in order and each one only applies when its input is
    given:

    1. ``caller`` is the resource's associated ``principal``
    2. ``grants(principal, caller)`` reports an explicit grant
    3. ``caller`` is the record ``owner``
    4. ``caller`` is one of the ``privileged`` principals

    Args:
        caller: Principal invoking the operation
        principal: Principal the resource belongs to (patient, account)
        grants: Permission lookup keyed by (principal, caller)
        owner: Owner or seller recorded on the target record
        privileged: Well-known principals allowed regardless of ownership
        deny_with: Error code reported when no rule matches

    Returns:
        Decision describing the outcome
    """
    if principal is not None and caller == principal:
        return Decision(allowed=True, rule="self")
    if principal is not None and grants is not None and grants(principal, caller):
        return Decision(allowed=True, rule="grant")
    if owner is not None and caller == owner:
        return Decision(allowed=True, rule="owner")
    if caller in set(privileged):
        return Decision(allowed=True, rule="privileged")
    return Decision(allowed=False, rule="denied", error=ErrorCode(deny_with))
