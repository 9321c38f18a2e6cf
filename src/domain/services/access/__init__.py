from .decision import DENIED, AccessDecisionEngine, Allowed, Denied, Verdict

__all__ = ["AccessDecisionEngine", "Allowed", "Denied", "DENIED", "Verdict"]
