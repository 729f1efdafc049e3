"""Abstract syntax tree for lambda calculus programs. Formally,

```
<program>   ::= <statement>*
<statement> ::= <term>                        ; LambdaTerm
              | <identifier> ":=" <term>      ; Definition
<term>      ::= <var>                         ; Call
              | "lambda" <var> "." <term>     ; Abstr
              | <term> <term>                 ; Apply, associating by left: a b c d = (((a b) c) d)
```

All nodes are immutable: a Program is built once by the parser and then only read by the code generator.
"""

from dataclasses import dataclass
from typing import Tuple


class Node:
    """Superclass for every node in the syntax tree."""

    @property
    def nodes(self):
        """Child nodes, in source order."""
        return []

    def display(self, indents=0):
        """Recursively displays the syntax tree with readable format.

        Format:
        <Node>(nodes=[
            <Node>(nodes=[
                ...
                <Node>('<name>')  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{type(self).__name__}("
        if self.nodes:
            result += "nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"


@dataclass(frozen=True)
class VarDecl(Node):
    """Variable name, used both for bound parameters and for variable references."""
    name: str

    def __post_init__(self):
        if not (self.name.isascii() and self.name.isalpha()):
            raise ValueError(f"'{self.name}' is not a valid variable name")

    def display(self, indents=0):
        return f"{'    ' * indents}{type(self).__name__}('{self.name}')"


class Term(Node):
    """A λ-term: Call, Abstr, or Apply."""


@dataclass(frozen=True)
class Call(Term):
    var: VarDecl

    @property
    def nodes(self):
        return [self.var]


@dataclass(frozen=True)
class Abstr(Term):
    """Abstraction: binds var in body. Bodies are greedy: lambda x. f x = lambda x. (f x)."""
    var: VarDecl
    body: Term

    @property
    def nodes(self):
        return [self.var, self.body]


@dataclass(frozen=True)
class Apply(Term):
    left: Term
    right: Term

    @property
    def nodes(self):
        return [self.left, self.right]


class Statement(Node):
    """A top-level program unit: LambdaTerm or Definition."""


@dataclass(frozen=True)
class LambdaTerm(Statement):
    term: Term

    @property
    def nodes(self):
        return [self.term]


@dataclass(frozen=True)
class Definition(Statement):
    """Binds name to term. The name is never resolved, so definitions may reference undefined names."""
    name: str
    term: Term

    def __post_init__(self):
        VarDecl(self.name)

    @property
    def nodes(self):
        return [VarDecl(self.name), self.term]


@dataclass(frozen=True)
class Program(Node):
    statements: Tuple[Statement, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "statements", tuple(self.statements))

    @property
    def nodes(self):
        return list(self.statements)

    def __iter__(self):
        return iter(self.statements)

    def __len__(self):
        return len(self.statements)

    def __getitem__(self, idx):
        return self.statements[idx]
