# display/layout.py

def pad(width: int, text: str) -> str:
    """
    Right-pad ``text`` with spaces to ``width`` characters.

    Text already at least ``width`` long comes back unchanged, never truncated.
    """
    missing = width - len(text)
    if missing >= 0:
        return text + " " * missing
    return text
