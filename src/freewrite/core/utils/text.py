"""Text utilities shared by entry metadata and export naming."""


def collapse_newlines(text: str) -> str:
    """Replace every newline with a single space and trim the ends."""
    if not text:
        return ""
    return text.replace("\n", " ").strip()


def split_words(text: str) -> list[str]:
    """Split on runs of whitespace (spaces, tabs, newlines), dropping empty tokens."""
    if not text:
        return []
    return text.split()


def truncate_text(text: str, max_length: int = 30, ellipsis: str = "...") -> str:
    """Keep the first ``max_length`` characters, appending ellipsis if anything was cut."""
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length] + ellipsis
