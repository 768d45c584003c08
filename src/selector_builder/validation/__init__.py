from selector_builder.validation.rules import TRANSITION_TABLE, Verdict, check_transition
from selector_builder.validation.validator import validate_transition

__all__ = [
    "TRANSITION_TABLE",
    "Verdict",
    "check_transition",
    "validate_transition",
]
