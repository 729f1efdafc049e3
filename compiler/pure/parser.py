"""Recursive-descent parser from the token sequence produced by compiler/pure/lexical.py to a syntax tree Program.

```
<program>   ::= <statement>*
<statement> ::= (<identifier> ":=" <term> | <term>) ";"
<term>      ::= <atom> <atom>*                     ; folded into left-nested Applys
<atom>      ::= <identifier>
              | "lambda" <identifier> "." <term>   ; body extends as far right as possible
              | "(" <term> ")"
```

There is no error recovery: the first token that doesn't fit the grammar raises a ParseError.
"""

from compiler.lang.error import ParseError
from compiler.pure.lexical import TokenKind
from compiler.pure.syntax import Abstr, Apply, Call, Definition, LambdaTerm, Program, VarDecl


class Parser:
    """Index cursor over an immutable token tuple. Tokens are only consumed once the production is certain."""
    ATOM_START = (TokenKind.IDENTIFIER, TokenKind.LAMBDA, TokenKind.OPEN_PAREN)

    def __init__(self, tokens):
        self.tokens = tuple(tokens)
        self.pos = 0

    def peek(self, offset=0):
        """Returns the token offset places after the cursor without consuming it, or None if there is none."""
        idx = self.pos + offset
        return self.tokens[idx] if idx < len(self.tokens) else None

    def peek_kind(self, offset=0):
        token = self.peek(offset)
        return token.kind if token is not None else None

    def advance(self):
        """Consumes and returns the token at the cursor."""
        token = self.peek()
        if token is None:
            raise ParseError("a token")
        self.pos += 1
        return token

    def expect(self, kind):
        """Consumes the token at the cursor, raising a ParseError if it isn't of the given kind."""
        token = self.peek()
        if token is None or token.kind is not kind:
            raise ParseError(kind.value, token)
        self.pos += 1
        return token

    def at_end(self):
        return self.pos >= len(self.tokens)

    def parse_program(self):
        statements = []
        while not self.at_end():
            statements.append(self.parse_statement())
        return Program(tuple(statements))

    def parse_statement(self):
        """A statement is a Definition if it starts with <identifier> ":=", otherwise it is a LambdaTerm."""
        if self.peek_kind() is TokenKind.IDENTIFIER and self.peek_kind(1) is TokenKind.DEFINITION:
            name = self.advance().text
            self.advance()
            statement = Definition(name, self.parse_term())
        else:
            statement = LambdaTerm(self.parse_term())

        self.expect(TokenKind.TERMINATOR)
        return statement

    def parse_term(self):
        term = self.parse_atom()
        while self.peek_kind() in Parser.ATOM_START:
            term = Apply(term, self.parse_atom())
        return term

    def parse_atom(self):
        token = self.peek()
        if token is None or token.kind not in Parser.ATOM_START:
            raise ParseError("identifier, lambda or '('", token)

        if token.kind is TokenKind.IDENTIFIER:
            self.advance()
            return Call(VarDecl(token.text))

        elif token.kind is TokenKind.LAMBDA:
            self.advance()
            var = VarDecl(self.expect(TokenKind.IDENTIFIER).text)
            self.expect(TokenKind.DOT)
            return Abstr(var, self.parse_term())

        self.advance()
        term = self.parse_term()
        self.expect(TokenKind.CLOSE_PAREN)
        return term


def parse(tokens):
    """Parses tokens into a Program. Raises a ParseError if tokens aren't a valid program."""
    return Parser(tokens).parse_program()
