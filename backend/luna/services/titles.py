"""
Conversation title derivation.
"""

TITLE_WORDS = 4
TITLE_MAX_LENGTH = 30
ELLIPSIS = "..."


def derive_title(message: str) -> str:
    """
    Build a conversation title from the first user message.

    Takes the first four whitespace-separated words; anything past 30
    characters is cut and marked with an ellipsis.
    """
    title = " ".join(message.split()[:TITLE_WORDS])
    if len(title) > TITLE_MAX_LENGTH:
        return title[:TITLE_MAX_LENGTH] + ELLIPSIS
    return title
