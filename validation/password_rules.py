import re
from dataclasses import dataclass, field
from typing import Callable, List, Tuple

MIN_LENGTH = 8
SPECIAL_CHARACTERS = "!@#$%^&*"

MIN_LENGTH_MESSAGE = "A senha deve ter no mínimo 8 caracteres"
UPPERCASE_MESSAGE = "A senha deve conter pelo menos 1 letra maiúscula"
DIGIT_MESSAGE = "A senha deve conter pelo menos 1 número"
SPECIAL_CHARACTER_MESSAGE = (
    "A senha deve conter pelo menos 1 caractere especial (!@#$%^&*)"
)

# MIN_LENGTH consecutive characters, line terminators break the run
_MIN_LENGTH_RUN = re.compile(f"[^\\n\\r\\u2028\\u2029]{{{MIN_LENGTH},}}")
_UPPERCASE = re.compile(r"[A-Z]")
# \d would also accept non-ASCII digits
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)


def _has_min_length(password: str) -> bool:
    return _MIN_LENGTH_RUN.search(password) is not None


def _has_uppercase(password: str) -> bool:
    return _UPPERCASE.search(password) is not None


def _has_digit(password: str) -> bool:
    return _DIGIT.search(password) is not None


def _has_special_character(password: str) -> bool:
    return _SPECIAL.search(password) is not None


# Order here is the order of messages in ValidationResult.errors
RULES: Tuple[Tuple[Callable[[str], bool], str], ...] = (
    (_has_min_length, MIN_LENGTH_MESSAGE),
    (_has_uppercase, UPPERCASE_MESSAGE),
    (_has_digit, DIGIT_MESSAGE),
    (_has_special_character, SPECIAL_CHARACTER_MESSAGE),
)


def evaluate(password: str) -> ValidationResult:
    """
    Checks the password against every composition rule. All rules are
    evaluated even when an earlier one fails, so the caller gets the full
    list of violations in rule order.
    """
    errors = [message for check, message in RULES if not check(password)]

    if errors:
        return ValidationResult(valid=False, errors=errors)

    return ValidationResult(valid=True)
