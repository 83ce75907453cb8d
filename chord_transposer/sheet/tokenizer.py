"""Whitespace tokenizing of sheet lines with column spans.

Chord lines are rewritten token by token, so every token keeps the
columns it came from.
"""

import re

from chord_transposer.sheet.models import Token

_TOKEN_RE = re.compile(r"\S+")


def tokenize_line(line: str) -> list[Token]:
    """Split a line into whitespace-separated tokens with their columns.

    Returns
    -------
    list[Token]
        One token per run of non-whitespace; ``end`` is exclusive.

    Examples
    --------
    >>> tokens = tokenize_line("Gm     C")
    >>> [(t.text, t.start, t.end) for t in tokens]
    [('Gm', 0, 2), ('C', 7, 8)]

    >>> [t.start for t in tokenize_line("  Am  D/F#")]
    [2, 6]
    """
    return [Token(text=m.group(), start=m.start(), end=m.end()) for m in _TOKEN_RE.finditer(line)]


def replace_tokens(line: str, tokens: list[Token], texts: list[str]) -> str:
    """Rebuild a line with new token texts, keeping the original gaps.

    Parameters
    ----------
    line : str
        The original line.
    tokens : list[Token]
        Tokens of ``line`` as returned by :func:`tokenize_line`.
    texts : list[str]
        Replacement text for each token, in the same order.

    Returns
    -------
    str
        The rebuilt line. Whitespace between, before and after tokens is
        copied verbatim, so only token widths can change.

    Examples
    --------
    >>> line = "  C   G "
    >>> replace_tokens(line, tokenize_line(line), ["D", "A"])
    '  D   A '
    """
    parts: list[str] = []
    cursor = 0
    for token, text in zip(tokens, texts):
        parts.append(line[cursor : token.start])
        parts.append(text)
        cursor = token.end
    parts.append(line[cursor:])
    return "".join(parts)
