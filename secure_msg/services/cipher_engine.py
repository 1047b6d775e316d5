"""Repeating-key shift cipher, input checks and key strength heuristics.

Every function here is pure: no hidden state, no I/O. The transform adds
(or subtracts) each key character's code point to the matching text
character's code point, cycling through the key. It is reversible
arithmetic, not encryption, and offers no protection against analysis.
"""

import random
import re
import string

from secure_msg.exceptions import (
    CodePointOutOfRangeError,
    InvalidCharacterError,
    KeyTooShortError,
    MissingInputError,
)
from secure_msg.models import CipherMode, KeyStrength, ValidationResult

MAX_CODE_POINT = 0x10FFFF

KEY_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "!@#$%^&*"

# ASCII word characters, any whitespace, and basic punctuation
_ALLOWED_TEXT_PATTERN = re.compile(r"[A-Za-z0-9_\s,.?!]*")
ALLOWED_TEXT_DESCRIPTION = (
    "letters, digits, underscores, whitespace and the punctuation , . ? !"
)

DEFAULT_MIN_KEY_LENGTH = 8
DEFAULT_STRONG_KEY_LENGTH = 8


def transform(text: str, key: str, mode: CipherMode) -> str:
    """Shift every character of text by the code point of the cycling key.

    Args:
        text: Text to transform
        key: Key whose characters are applied in turn, wrapping around
        mode: ENCRYPT adds key code points, DECRYPT subtracts them

    Returns:
        The transformed text, same length as the input

    Raises:
        MissingInputError: If text or key is empty
        CodePointOutOfRangeError: If a shifted value is not a valid code point
    """
    if not text or not key:
        raise MissingInputError("Both text and key are required")

    sign = 1 if mode is CipherMode.ENCRYPT else -1
    key_length = len(key)
    chars = []
    for i, ch in enumerate(text):
        shifted = ord(ch) + sign * ord(key[i % key_length])
        if not 0 <= shifted <= MAX_CODE_POINT:
            raise CodePointOutOfRangeError(i, shifted)
        chars.append(chr(shifted))
    return "".join(chars)


def encrypt(text: str, key: str) -> str:
    """Shorthand for transform(text, key, CipherMode.ENCRYPT)."""
    return transform(text, key, CipherMode.ENCRYPT)


def decrypt(text: str, key: str) -> str:
    """Shorthand for transform(text, key, CipherMode.DECRYPT)."""
    return transform(text, key, CipherMode.DECRYPT)


def validate_input(text: str, mode: CipherMode) -> ValidationResult:
    """Check text against the encrypt-side allow-list.

    Decrypt mode is never checked, since shifted text routinely contains
    characters outside the allow-list.

    Args:
        text: Text the user wants to transform
        mode: Current cipher mode

    Returns:
        ValidationResult carrying an InvalidCharacterError on failure
    """
    if mode is CipherMode.DECRYPT:
        return ValidationResult()
    if _ALLOWED_TEXT_PATTERN.fullmatch(text) is None:
        return ValidationResult(
            InvalidCharacterError(f"Only {ALLOWED_TEXT_DESCRIPTION} are allowed")
        )
    return ValidationResult()


def validate_key(key: str, min_length: int = DEFAULT_MIN_KEY_LENGTH) -> ValidationResult:
    """Check that a key meets the minimum length (in both modes)."""
    if len(key) < min_length:
        return ValidationResult(
            KeyTooShortError(f"Key must be at least {min_length} characters long")
        )
    return ValidationResult()


def score_key_strength(key: str, strong_length: int = DEFAULT_STRONG_KEY_LENGTH) -> KeyStrength:
    """Score a key from 0 to 100 using five independent 20-point checks.

    Checks, in suggestion order: longer than strong_length, has an uppercase
    letter, has a lowercase letter, has a digit, has a non-alphanumeric
    character. Each failed check adds one suggestion.

    Args:
        key: Key to rate
        strong_length: Length the key must exceed to earn the length point

    Returns:
        KeyStrength with the summed score and suggestions for unmet checks
    """
    checks = [
        (len(key) > strong_length, f"Use more than {strong_length} characters"),
        (re.search(r"[A-Z]", key) is not None, "Add uppercase letters"),
        (re.search(r"[a-z]", key) is not None, "Add lowercase letters"),
        (re.search(r"[0-9]", key) is not None, "Add numbers"),
        (re.search(r"[^A-Za-z0-9]", key) is not None, "Add special characters"),
    ]
    score = sum(20 for passed, _ in checks if passed)
    suggestions = [hint for passed, hint in checks if not passed]
    return KeyStrength(score=score, suggestions=suggestions)


def generate_random_key(length: int = 16, rng: random.Random | None = None) -> str:
    """Generate a key drawn uniformly from KEY_ALPHABET.

    Uses the non-cryptographic ``random`` module, so generated keys must
    not be relied upon where real secrecy matters.

    Args:
        length: Number of characters to draw
        rng: Optional random source (defaults to the module-level generator)

    Returns:
        Random key string

    Raises:
        ValueError: If length is less than 1
    """
    if length < 1:
        raise ValueError(f"Key length must be at least 1, got {length}")
    source = rng or random
    return "".join(source.choices(KEY_ALPHABET, k=length))
