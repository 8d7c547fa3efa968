from __future__ import annotations
from typing import Iterator, List, Tuple

TOKEN_SEP = " "

def source_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (lineno, line) with 1-based numbers; '\\r\\n' endings are accepted."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for lineno, raw in enumerate(lines, start=1):
        yield lineno, raw[:-1] if raw.endswith("\r") else raw

# str.isspace() accepts these separators, Unicode White_Space does not
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")

def is_blank(line: str) -> bool:
    """True for empty or whitespace-only lines."""
    return not line or (line.isspace() and _NOT_WHITESPACE.isdisjoint(line))

def split_tokens(line: str) -> List[str]:
    # fields are separated by single spaces; runs of spaces give empty tokens
    return line.split(TOKEN_SEP)

def split_mnemonic_operands(line: str) -> Tuple[str, List[str]]:
    """Return (mnemonic, operand tokens) as written in the source."""
    tokens = split_tokens(line)
    return tokens[0], tokens[1:]

def strip_suffix(token: str, suffix: str) -> Tuple[str, bool]:
    """Return (token without suffix, had_suffix)."""
    if suffix and token.endswith(suffix):
        return token[:-len(suffix)], True
    return token, False
