"""
Casbin Configuration Module

Paths of the Casbin model and policy files that hold the lab's endpoint gate
table: which roles may invoke which operation at all. Object-level rules
(minimum role per person) are not expressed here; they live in the access
decision engine.

**Security Note**: The policy file is the single source of truth for
endpoint gating. Every HTTP method that reaches an operation is gated by the
operation's entry, so adding a new route never requires a new policy line
(OWASP A01:2021 - Broken Access Control).
"""

from pathlib import Path

BASE_DIR = Path(__file__).parent.resolve()
MODEL_PATH: Path = BASE_DIR / "model.conf"
POLICY_PATH: Path = BASE_DIR / "policy.csv"
