"""
Permission Dependencies Module

FastAPI dependencies exposing the endpoint gate table to the API layer.
`require_operation` is attached to each route so the gate runs before the
request body is read; the resource operations check it again through the
`GatePolicy` built here.
"""

from functools import lru_cache
from typing import Callable

import casbin
from fastapi import Depends

from src.core.dependencies.identity import Identity
from src.domain.services.access.enforcement import enforce_gate

from .enforcer import get_enforcer
from .gates import GatePolicy, Operation


@lru_cache(maxsize=1)
def _gate_policy(enforcer: casbin.Enforcer) -> GatePolicy:
    return GatePolicy(enforcer)


def get_gate_policy(enforcer: casbin.Enforcer = Depends(get_enforcer)) -> GatePolicy:
    """Return the process-wide `GatePolicy` for the given enforcer."""
    return _gate_policy(enforcer)


def require_operation(operation: Operation) -> Callable[..., None]:
    """Create a route dependency enforcing the gate of ``operation``.

    Example:
        ``@router.delete(..., dependencies=[Depends(require_operation(DELETE_PERSON))])``
    """

    def operation_gate(identity: Identity, gates: GatePolicy = Depends(get_gate_policy)) -> None:
        enforce_gate(gates, identity, operation)

    return operation_gate
