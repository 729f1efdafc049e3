"""Lambda calculus to Haskell compiler.

Basic program flow:
    1. Lexer: splits the source into tokens, line by line (see compiler/pure/lexical.py)
        - Will fail with a LexicalError if any non-whitespace text isn't a token
    2. Parser: builds a Program syntax tree by recursive descent (see compiler/pure/parser.py)
        - Will fail with a ParseError on the first token that doesn't fit the grammar
    3. Code generation: walks the Program and renders one line of Haskell per statement (see compiler/pure/codegen.py)

No names are resolved and nothing is evaluated, so `omega := m m;` compiles fine even if `m` is never defined.
"""

from compiler.pure.codegen import generate
from compiler.pure.lexical import tokenize
from compiler.pure.parser import parse


def compile_syntax(source):
    """Returns the syntax tree of source rather than generated code, so that other backends can reuse it."""
    return parse(tokenize(source))


def compile_source(source):
    """Compiles lambda calculus source to Haskell. Raises a LexicalError or ParseError instead of returning partial
    output.
    """
    return generate(compile_syntax(source))
