r"""Haskell code generation from a parsed Program. Each statement becomes one line:

```
lambda f. lambda x. f x;        ->  \f -> \x -> (f x)
(lambda f. lambda x. f x) T;    ->  (\f -> \x -> (f x)) T
func := lambda x. x;            ->  func = \x -> x
f (g h);                        ->  f (g h)
f g h;                          ->  f g h
```

Parentheses are only dropped where Haskell's own precedence gives the same tree: chained abstractions, left-nested
applications, and bare variables.
"""

from compiler.pure.syntax import Abstr, Apply, Call, Definition, LambdaTerm


def parenthesize(expr):
    return f"({expr})"


def generate(program):
    """Generates the code for every statement in program, one per line."""
    return "\n".join(generate_statement(statement) for statement in program)


def generate_statement(statement):
    if isinstance(statement, Definition):
        return f"{statement.name} = {generate_term(statement.term)}"
    elif isinstance(statement, LambdaTerm):
        return generate_term(statement.term)
    raise TypeError(f"expected a Statement, got {type(statement).__name__}")


def generate_term(term):
    """Renders term, parenthesizing subterms only where they would otherwise be ambiguous."""
    if isinstance(term, Call):
        return term.var.name

    elif isinstance(term, Abstr):
        body = generate_term(term.body)
        if not isinstance(term.body, (Abstr, Call)):
            body = parenthesize(body)
        return f"\\{term.var.name} -> {body}"

    elif isinstance(term, Apply):
        # walk the left spine in a loop: f a b c is Apply(Apply(Apply(f, a), b), c)
        args = []
        while isinstance(term, Apply):
            args.append(term.right)
            term = term.left

        head = generate_term(term)
        if isinstance(term, Abstr):
            head = parenthesize(head)

        rendered = [head]
        for arg in reversed(args):
            right = generate_term(arg)
            if not isinstance(arg, Call):
                right = parenthesize(right)
            rendered.append(right)
        return " ".join(rendered)

    raise TypeError(f"expected a Term, got {type(term).__name__}")
