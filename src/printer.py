"""
Zaban token printer
Renders finished token lists for humans
"""

import sys
from typing import Dict, Iterable, List, Optional, TextIO
from lexer import Token, TokenKind

def token_kind_name(kind: TokenKind) -> str:
    return kind.value

def format_token(token: Token, show_line: bool = False) -> str:
    text = f"Type: {token_kind_name(token.kind)}, Value: {token.lexeme}"
    if show_line:
        return f"Line {token.line}: {text}"
    return text

def print_tokens(tokens: Iterable[Token], out: Optional[TextIO] = None,
                 show_line: bool = False):
    """Write one `Type: <KIND>, Value: <lexeme>` line per token."""
    out = out or sys.stdout
    for token in tokens:
        print(format_token(token, show_line=show_line), file=out)

def count_kinds(tokens: Iterable[Token]) -> Dict[TokenKind, int]:
    counts = {kind: 0 for kind in TokenKind}
    for token in tokens:
        counts[token.kind] += 1
    return counts

def format_summary(tokens: List[Token]) -> str:
    counts = count_kinds(tokens)
    total = len(tokens)
    unknown_share = (counts[TokenKind.UNKNOWN] * 100.0 / total) if total else 0.0

    lines = [
        "----------------------------------------",
        f"Total tokens:     {total:8d}",
        "----------------------------------------",
    ]
    for kind, count in counts.items():
        lines.append(f"{token_kind_name(kind) + ':':<18s}{count:8d}")
    lines.append("----------------------------------------")
    lines.append(f"Unknown share:    {unknown_share:8.2f}%")
    return "\n".join(lines)

def format_source_banner(source: str) -> str:
    return f"\n\n\nSource Code: {source} \n\n\n"
