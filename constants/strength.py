"""
Fixed tables used by the password strength meter and the registration policy.
Wording is kept in Korean to match the strings existing clients already display.
"""

MIN_LENGTH = 8

# Characters accepted for the special-character criterion
SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"

# Criterion keys, in the order they are checked
LENGTH = "length"
LETTER = "letter"
DIGIT = "digit"
SPECIAL = "special"
CRITERIA = (LENGTH, LETTER, DIGIT, SPECIAL)

# Indexed by score (0-4)
STRENGTH_LABELS = ("매우 약함", "약함", "보통", "강함", "매우 강함")
STRENGTH_COLORS = ("#ef4444", "#f97316", "#eab308", "#22c55e", "#10b981")

SUGGESTIONS = {
    LENGTH: "최소 8자 이상 입력하세요",
    LETTER: "영문을 포함하세요",
    DIGIT: "숫자를 포함하세요",
    SPECIAL: "특수문자를 포함하세요",
}

POLICY_ERRORS = {
    LENGTH: "비밀번호는 최소 8자 이상이어야 합니다.",
    LETTER: "비밀번호는 영문을 포함해야 합니다.",
    DIGIT: "비밀번호는 숫자를 포함해야 합니다.",
    SPECIAL: "비밀번호는 특수문자를 포함해야 합니다.",
}

PASSWORD_MISMATCH = "Password and confirmation do not match."
