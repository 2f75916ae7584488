"""
Input validators and the errors they raise.

The parser accepts any string and resolves malformed markers by falling back;
the checks here guard the few places where input can be genuinely unusable.
"""

from typing import Any


CAPTION_PAIRING_POLICIES = ('positional', 'anchored')


class ReportInputError(TypeError):
    """Raised when the parser is handed something that is not text."""


def validate_raw_text(raw_text: Any) -> str:
    """
    Validate that parser input is a string.

    Any string is acceptable, including the empty string. Bytes are rejected
    rather than guessed at: decoding is the caller's job.

    Args:
        raw_text: Candidate parser input

    Returns:
        The input unchanged

    Raises:
        ReportInputError: If input is not a str

    Example:
        >>> validate_raw_text('')
        ''
        >>> validate_raw_text(None)  # Raises ReportInputError
    """
    if not isinstance(raw_text, str):
        raise ReportInputError(
            f"Report text must be a string, got: {type(raw_text).__name__}"
        )
    return raw_text


def validate_caption_pairing(name: str) -> str:
    """
    Validate a caption pairing policy name.

    Raises:
        ValueError: If the name is not a known policy
    """
    normalized = (name or '').strip().lower()
    if normalized not in CAPTION_PAIRING_POLICIES:
        raise ValueError(
            f"Unknown caption pairing policy: '{name}'\n"
            f"Valid policies: {list(CAPTION_PAIRING_POLICIES)}"
        )
    return normalized

