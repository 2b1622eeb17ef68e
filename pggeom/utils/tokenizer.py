from typing import List

from pggeom.exceptions import UnbalancedDelimiters


def strip_outer_delimiters(text: str, open: str = '(', close: str = ')') -> str:
    """Remove one leading `open` and one trailing `close` string.

    Each side is removed only if present, so `strip_outer_delimiters('1 2')`
    returns the text unchanged.
    """
    start = len(open) if text.startswith(open) else 0
    end = len(text)
    if text.endswith(close) and end - len(close) >= start:
        end -= len(close)
    return text[start:end]


def has_outer_delimiters(text: str, open: str = '(', close: str = ')') -> bool:
    """Check if whole text is enclosed by one matching delimiter pair.

    `(1 2)` is enclosed, while `(1 2),(3 4)` is not, even if it starts and
    ends with delimiters.
    """
    if not (text.startswith(open) and text.endswith(close)):
        return False
    depth = 0
    for i, char in enumerate(text):
        if char == open:
            depth += 1
        elif char == close:
            depth -= 1
            if depth == 0:
                return i == len(text) - 1
    return False


def split_top_level(
    text: str,
    separator: str = ',',
    open: str = '(',
    close: str = ')',
) -> List[str]:
    """Split text on separators which are not nested inside delimiters.

        >>> split_top_level('(1 2,3 4),(5 6,7 8)')
        ['(1 2,3 4)', '(5 6,7 8)']

    Splitting an empty string gives a single empty token.
    """
    tokens = []
    depth = 0
    start = 0
    for i, char in enumerate(text):
        if char == open:
            depth += 1
        elif char == close:
            depth -= 1
            if depth < 0:
                raise UnbalancedDelimiters(text=text, open=open, close=close)
        elif char == separator and depth == 0:
            tokens.append(text[start:i])
            start = i + 1
    if depth != 0:
        raise UnbalancedDelimiters(text=text, open=open, close=close)
    tokens.append(text[start:])
    return tokens
