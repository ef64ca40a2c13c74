"""Split raw text into the line sequence compared by the diff engine"""


def split_lines(text: str) -> list[str]:
    """Split on '\\n' keeping empty segments. The empty string has zero lines, not one blank line.

    No trimming and no '\\r\\n' normalization: a trailing '\\r' is part of the line.
    """
    if text == "":
        return []
    return text.split("\n")
