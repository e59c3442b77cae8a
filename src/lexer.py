"""
Zaban Programming Language Lexer
Tokenizes source code into a flat list of classified tokens
"""

from enum import Enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional

class TokenKind(Enum):
    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    INTEGER_LITERAL = "INTEGER_LITERAL"
    FLOAT_LITERAL = "FLOAT_LITERAL"
    OPERATOR = "OPERATOR"
    PUNCTUATOR = "PUNCTUATOR"
    UNKNOWN = "UNKNOWN"

@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str
    line: int

# Reserved words and what they stand for
KEYWORDS: Mapping[str, str] = MappingProxyType({
    'hindsa': 'int',
    'asharia': 'float',
    'agar': 'if',
    'phir': 'else',
    'lekinagar': 'else if',
    'jabtk': 'while',
    'niklo': 'break',
    'wapsi': 'return',
    'irshaad': 'print',
    'chalooo': 'continue',
})

WHITESPACE = ' \t\r\n'
BASIC_OPERATORS = '+-*/=!'
EXTENDED_OPERATORS = '+-*/=!<>'
PUNCTUATORS = '(){};'

def is_whitespace(char: str) -> bool:
    return char in WHITESPACE

def is_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()

def is_digit(char: str) -> bool:
    return char.isascii() and char.isdigit()

def is_alphanum(char: str) -> bool:
    return is_alpha(char) or is_digit(char)

class Scanner:
    def __init__(self, source: str, track_lines: bool = True,
                 extended_operators: bool = True):
        self.source = source
        self.track_lines = track_lines
        self.extended_operators = extended_operators
        self.keywords = KEYWORDS
        self.operators = EXTENDED_OPERATORS if extended_operators else BASIC_OPERATORS
        self.position = 0
        self.line = 1

    @classmethod
    def from_settings(cls, source: str, settings) -> 'Scanner':
        """Build a scanner from anything carrying the two capability flags."""
        return cls(source,
                   track_lines=settings.track_lines,
                   extended_operators=settings.extended_operators)

    def current_char(self) -> Optional[str]:
        if self.position >= len(self.source):
            return None
        return self.source[self.position]

    def peek_char(self, offset: int = 1) -> Optional[str]:
        peek_pos = self.position + offset
        if peek_pos >= len(self.source):
            return None
        return self.source[peek_pos]

    def advance(self) -> str:
        char = self.source[self.position]
        self.position += 1
        if char == '\n' and self.track_lines:
            self.line += 1
        return char

    def read_word(self) -> str:
        start = self.position
        while self.current_char() is not None and is_alphanum(self.current_char()):
            self.position += 1
        return self.source[start:self.position]

    def read_number(self) -> str:
        start = self.position
        has_dot = False

        while self.current_char() is not None:
            char = self.current_char()
            if char == '.':
                # A second point ends the literal and is scanned on its own
                if has_dot:
                    break
                has_dot = True
            elif not is_digit(char):
                break
            self.position += 1

        return self.source[start:self.position]

    def read_operator(self) -> str:
        compound = self.extended_operators and self.peek_char() == '='
        op = self.advance()
        if compound:
            op += self.advance()
        return op

    def scan(self) -> List[Token]:
        """
        Scan the whole source and return its tokens in order.

        Never raises: characters outside the grammar come back as
        UNKNOWN tokens for the consumer to reject.
        """
        self.position = 0
        self.line = 1
        tokens = []

        while self.current_char() is not None:
            char = self.current_char()
            start_line = self.line

            if is_whitespace(char):
                self.advance()
                continue

            # Identifiers and keywords
            if is_alpha(char):
                word = self.read_word()
                kind = TokenKind.KEYWORD if word in self.keywords else TokenKind.IDENTIFIER
                tokens.append(Token(kind, word, start_line))
                continue

            # Integer and float literals
            if is_digit(char):
                number = self.read_number()
                kind = TokenKind.FLOAT_LITERAL if '.' in number else TokenKind.INTEGER_LITERAL
                tokens.append(Token(kind, number, start_line))
                continue

            if char in self.operators:
                tokens.append(Token(TokenKind.OPERATOR, self.read_operator(), start_line))
                continue

            if char in PUNCTUATORS:
                tokens.append(Token(TokenKind.PUNCTUATOR, self.advance(), start_line))
                continue

            tokens.append(Token(TokenKind.UNKNOWN, self.advance(), start_line))

        return tokens

def tokenize(source: str, track_lines: bool = True,
             extended_operators: bool = True) -> List[Token]:
    """Scan source in one call."""
    scanner = Scanner(source, track_lines=track_lines,
                      extended_operators=extended_operators)
    return scanner.scan()
