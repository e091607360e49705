"""
Closed value domains for todo tool parameters.

Each domain is a fixed, ordered set of case-sensitive strings. The order is
the order used in error messages.
"""

from typing import Any, Dict, Tuple


PRIORITY = "priority"
TODO_TYPE = "type"
FORMAT = "format"
OPERATION = "operation"

VALID_VALUES: Dict[str, Tuple[str, ...]] = {
    PRIORITY: ("high", "medium", "low"),
    TODO_TYPE: ("feature", "bug", "refactor", "research", "multi-phase", "phase", "subtask"),
    FORMAT: ("full", "summary", "list"),
    OPERATION: ("append", "replace", "prepend", "toggle"),
}

# Types that must name a parent todo
PARENTED_TYPES = ("phase", "subtask")
MULTI_PHASE = "multi-phase"


def valid_values(domain: str) -> Tuple[str, ...]:
    """Return the allowed values of a domain, in message order."""
    try:
        return VALID_VALUES[domain]
    except KeyError:
        raise ValueError(f"Unknown value domain: {domain}")


def is_member(domain: str, value: Any) -> bool:
    """
    Check membership of a value in a closed domain

    No case folding or trimming is applied. Empty strings and non-string
    values are never members.
    """
    return isinstance(value, str) and value != "" and value in valid_values(domain)


def is_valid_priority(value: Any) -> bool:
    return is_member(PRIORITY, value)


def is_valid_todo_type(value: Any) -> bool:
    return is_member(TODO_TYPE, value)


def is_valid_format(value: Any) -> bool:
    return is_member(FORMAT, value)


def is_valid_operation(value: Any) -> bool:
    return is_member(OPERATION, value)


def enum_error_message(domain: str, value: str) -> str:
    """Build the canonical message for a top-level enum violation."""
    allowed = ", ".join(valid_values(domain))
    return f"invalid {domain} '{value}', must be one of: {allowed}"
