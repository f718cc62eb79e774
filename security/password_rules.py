import re
from dataclasses import dataclass
from typing import Dict, List, Tuple

from constants.strength import (
    CRITERIA,
    DIGIT,
    LENGTH,
    LETTER,
    MIN_LENGTH,
    PASSWORD_MISMATCH,
    POLICY_ERRORS,
    SPECIAL,
    SPECIAL_CHARACTERS,
    STRENGTH_COLORS,
    STRENGTH_LABELS,
    SUGGESTIONS,
)

_LETTER_RE = re.compile(r"[a-zA-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SPECIAL_RE = re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]")


@dataclass(frozen=True)
class StrengthVerdict:
    """
    Result of one strength evaluation.
    label and color are looked up from the fixed tables by score.
    """
    score: int
    label: str
    color: str
    suggestions: Tuple[str, ...] = ()

    def as_dict(self) -> Dict[str, object]:
        return {
            "score": self.score,
            "label": self.label,
            "color": self.color,
            "suggestions": list(self.suggestions),
        }


def _check_criteria(password: str) -> Dict[str, bool]:
    return {
        LENGTH: len(password) >= MIN_LENGTH,
        LETTER: _LETTER_RE.search(password) is not None,
        DIGIT: _DIGIT_RE.search(password) is not None,
        SPECIAL: _SPECIAL_RE.search(password) is not None,
    }


def tier_for_score(score: int) -> Tuple[str, str]:
    """
    Return (label, color) for a score. Scores outside the tables fall back to the weakest tier.
    """
    if 0 <= score < len(STRENGTH_LABELS):
        return STRENGTH_LABELS[score], STRENGTH_COLORS[score]
    return STRENGTH_LABELS[0], STRENGTH_COLORS[0]


def evaluate_password_strength(password: str) -> StrengthVerdict:
    """
    Score a candidate password on four presence checks:
      - At least 8 characters
      - At least one ASCII letter
      - At least one digit
      - At least one special character
    Each satisfied check adds one point. Each unmet check adds a suggestion,
    always in the order above. Never raises for string input.
    """
    checks = _check_criteria(password)
    score = 0
    suggestions: List[str] = []
    for criterion in CRITERIA:
        if checks[criterion]:
            score += 1
        else:
            suggestions.append(SUGGESTIONS[criterion])

    label, color = tier_for_score(score)
    return StrengthVerdict(score=score, label=label, color=color, suggestions=tuple(suggestions))


def validate_password_strength(password: str) -> Tuple[bool, List[str]]:
    """
    Validate a password against the registration policy (all four checks must pass).
    Returns a tuple (is_valid, errors). errors is empty when valid.
    """
    if not isinstance(password, str):
        password = ""
    checks = _check_criteria(password)
    errors = [POLICY_ERRORS[criterion] for criterion in CRITERIA if not checks[criterion]]
    return not errors, errors


def assert_passwords_match(password: str, confirm_password: str) -> None:
    """
    Raise ValueError if the password and confirmation do not match.
    """
    if password != confirm_password:
        raise ValueError(PASSWORD_MISMATCH)
