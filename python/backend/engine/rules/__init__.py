from backend.engine.rules.rules import (
    BOUNDED_BY_MAX,
    DEFAULT_RULES,
    NO_DUPLICATES,
    Rule,
    check_rules,
)

__all__ = ["BOUNDED_BY_MAX", "DEFAULT_RULES", "NO_DUPLICATES", "Rule", "check_rules"]
