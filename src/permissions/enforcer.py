"""Casbin Enforcer Module

This module initializes the Casbin enforcer that evaluates the endpoint gate
table. Subjects are role names, objects are operation names (for example
``person`` or ``document:pdf``) and actions are verbs (``list``, ``render``).

The enforcer is initialized as a singleton so that the policy file is read
once per process.

Functions:
    get_enforcer: Returns the initialized Casbin enforcer instance.
"""

import logging

import casbin

from .config import MODEL_PATH, POLICY_PATH

logger = logging.getLogger(__name__)

# Global enforcer instance for singleton pattern
_enforcer = None


def get_enforcer() -> casbin.Enforcer:
    """Initialize and return the Casbin enforcer with the configured model and policy.

    Returns:
        casbin.Enforcer: The initialized Casbin enforcer instance.

    Raises:
        FileNotFoundError: If the model or policy file is missing.

    Example:
        `get_enforcer().enforce("admin", "person", "delete")`
    """
    global _enforcer
    if _enforcer is not None:
        return _enforcer

    for path in (MODEL_PATH, POLICY_PATH):
        if not path.exists():
            logger.error(f"Casbin file not found at {path}")
            raise FileNotFoundError(f"Casbin file not found at {path}")

    adapter = casbin.persist.adapters.FileAdapter(str(POLICY_PATH))
    _enforcer = casbin.Enforcer(str(MODEL_PATH), adapter)

    logger.info("Casbin enforcer initialized successfully")
    return _enforcer
