"""Text utilities for log-safe string handling."""

# Characters that make a clean cut point when shortening text
BREAK_CHARS = frozenset(" \n\t,.!?;:-。，、")


def safe_truncate(text: str, max_chars: int, suffix: str = "...") -> str:
    """Truncate text for logging, preferring a word boundary.

    Looks back up to 20 characters for a break character so that prompts
    and model replies are not cut mid-word in log records.

    Args:
        text: Text to truncate
        max_chars: Maximum characters (excluding suffix)
        suffix: Suffix to append if truncated (default "...")

    Returns:
        Truncated text with suffix if needed
    """
    if not text or len(text) <= max_chars:
        return text

    truncated = text[:max_chars]
    for i in range(min(20, max_chars - 1), 0, -1):
        if truncated[-i] in BREAK_CHARS:
            truncated = truncated[: max_chars - i].rstrip()
            break

    return truncated + suffix
