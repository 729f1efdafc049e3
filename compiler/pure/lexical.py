r"""Lexical analysis for lambda calculus source text: turns a string into the flat token sequence consumed by
compiler/pure/parser.py.

Tokens are matched with the following regular expressions, tried in order (the first match wins):

```
<lambda>      ::= \blambda\b        ; must come before <identifier>, otherwise "lambda" would be an identifier
<identifier>  ::= \b[a-zA-Z]+\b     ; letters only: "x1" and "f_g" are lexical errors
<dot>         ::= \.
<definition>  ::= :=
<open_paren>  ::= \(
<close_paren> ::= \)
<terminator>  ::= ;
```

Every line is tokenized on its own, so a token can never span multiple lines. Matches are anchored to the start of the
remaining (whitespace-stripped) text: anything that isn't whitespace must be covered by a token, or a LexicalError is
raised.
"""

from dataclasses import dataclass, field
from enum import Enum
import re

from compiler.lang.error import LexicalError


class TokenKind(Enum):
    LAMBDA = "lambda"
    IDENTIFIER = "identifier"
    DOT = "'.'"
    DEFINITION = "':='"
    OPEN_PAREN = "'('"
    CLOSE_PAREN = "')'"
    TERMINATOR = "';'"


TOKEN_TYPES = [
    (TokenKind.LAMBDA, re.compile(r"\blambda\b")),
    (TokenKind.IDENTIFIER, re.compile(r"\b[a-zA-Z]+\b")),
    (TokenKind.DOT, re.compile(r"\.")),
    (TokenKind.DEFINITION, re.compile(r":=")),
    (TokenKind.OPEN_PAREN, re.compile(r"\(")),
    (TokenKind.CLOSE_PAREN, re.compile(r"\)")),
    (TokenKind.TERMINATOR, re.compile(r";")),
]


@dataclass(frozen=True)
class Token:
    """A (kind, text) pair. line and column are only kept for error messages."""
    kind: TokenKind
    text: str
    line: int = field(default=1, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self):
        return f"Token({self.kind.name}, '{self.text}')"


def tokenize(text):
    """Tokenizes each line of text through tokenize_line, then concatenates all of the tokens together."""
    tokens = []
    for line_num, line in enumerate(text.splitlines(), 1):
        tokens.extend(tokenize_line(line, line_num))
    return tuple(tokens)


def tokenize_line(line, line_num=1):
    """Grabs the first token in line using tokenize_first, then repeats on the rest of the line until it is empty. If no
    token matches, raises a LexicalError.
    """
    tokens = []
    rest = line.strip()
    stripped_len = len(line.rstrip())

    while rest:
        first = tokenize_first(rest)
        if first is None:
            raise LexicalError(line, rest, line_num)

        (kind, match), after = first
        tokens.append(Token(kind, match, line_num, stripped_len - len(rest)))
        rest = after.strip()

    return tokens


def tokenize_first(line):
    """Returns ((kind, match), rest) for the first token type that matches at the very start of the stripped line, or
    None if there is no match.
    """
    line = line.strip()
    if not line:
        return None

    for kind, pattern in TOKEN_TYPES:
        match = pattern.match(line)
        if match:
            return (kind, match.group()), line[match.end():]
    return None
