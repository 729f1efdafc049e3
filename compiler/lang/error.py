"""Error handling for the lcc compiler. Only GenericExceptions (LexicalErrors and ParseErrors) should be encountered
during compilation: if another type of error is raised and makes it all the way to ErrorHandler, it is assumed to be an
internal issue.

Python version must be >=3.7, because error handling requires that dicts are insertion-ordered.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error message so that it can be used to throw a lcc error."""

    def __init__(self, msg, exprs=None, start=0, end=-1, line=None, diagnosis=True, internal=False):
        """Parses args for GenericException. exprs[0] should be the offending expr, and line is its 1-based line number
        in the compiled source (if known).
        """
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.line = line
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.msg)


class LexicalError(GenericException):
    """Raised when no token matches at the start of the remaining text of a line."""

    def __init__(self, line_expr, rest, line=None):
        column = len(line_expr.rstrip()) - len(rest)
        msg = "error while tokenizing: no token matches '{1}'"
        super().__init__(msg, (line_expr, rest), start=column, end=column + 1, line=line)

        self.rest = rest
        self.column = column


class ParseError(GenericException):
    """Raised when the token stream does not match the grammar. token is the offending token, or None if the tokens ran
    out.
    """

    def __init__(self, expected, token=None):
        if token is None:
            super().__init__(f"expected {expected}, got end of input")
            self.column = None
        else:
            super().__init__(f"expected {expected}, got '{{}}'", token.text, line=token.line)
            self.column = token.column

        self.expected = expected
        self.token = token

    def locate(self, line_expr):
        """Swaps the offending token for the whole source line it was read from, so that the diagnosis points at the
        token in place. Does nothing at end of input.
        """
        if self.token is not None:
            self.expr = line_expr
            self.start = self.token.column
            self.end = self.token.column + len(self.token.text)


class ErrorHandler:
    """Context manager that will silently suppress Python errors and raise custom lcc errors."""
    ERROR = "red"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called once the offending line is known."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after a successful Session compile."""
        self.traceback[path] = (None, None)

    @staticmethod
    def diagnose(error):
        """Returns offending part of error.expr highlighted and bolded."""
        diagnosis = "  " + error.expr[:error.start]

        end = max(error.end, error.start + 1)
        diagnosis += colored(error.expr[error.start:end], ErrorHandler.ERROR, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * error.start
        diagnosis += colored("^" + "~" * (end - error.start - 1), ErrorHandler.ERROR, attrs=["bold"])

        return diagnosis

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a GenericException, and self.traceback must be a
        dict of file: (line, line_num) representing origination of error.
        """
        error_msg = ""
        for file, (line, line_num) in self.traceback.items():  # assumes dict is insertion-ordered
            if line:
                error_msg += f"  File '{file}', line {line_num}:\n"
                error_msg += f"    {line}\n"

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error))

        if self.fatal:
            sys.exit(1)
        self.traceback = {path: (None, None) for path in self.traceback}  # no need if error is fatal

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is None:
            return False
        elif issubclass(exc_type, KeyboardInterrupt):
            self.throw(GenericException("keyboard interrupt"))
        elif issubclass(exc_type, SystemExit):
            do_exit = True
        elif issubclass(exc_type, RecursionError):
            self.throw(GenericException("maximum recursion depth exceeded, λ-term is nested too deeply"))
        elif issubclass(exc_type, GenericException):
            self.throw(exc_val)
        else:
            self.throw(GenericException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
