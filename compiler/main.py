"""Compiles lambda calculus files to Haskell, or runs in command-line mode. Also uses error handling context manager.
Installed as the lcc executable script.

Python version must be >=3.7, because error handling requires that dicts are insertion-ordered.
"""

import argparse
import sys

from compiler.lang.error import ErrorHandler
from compiler.lang.session import Session
from compiler.lang.shell import Shell


def main(argv=None):
    """Runs lcc compiler. Called from lcc executable script."""
    assert sys.version_info >= (3, 7), "lcc cannot be run with python < 3.7"

    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(description="lambda calculus to Haskell compiler")
        parser.add_argument("file", help="file to compile (if empty, goes to command-line mode)", nargs="?")
        parser.add_argument("-o", "--output", help="file to write Haskell code to (default: FILE with .hs extension)")
        parser.add_argument("--ast", help="print the syntax tree of FILE instead of compiling it", action="store_true")
        args = parser.parse_args(argv)

        if args.file is None and (args.output is not None or args.ast):
            parser.error("-o/--output and --ast require FILE")

        if args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False)

            if args.ast:
                print(sess.syntax(sess.read()).display())
            else:
                print(f"{args.file} -> {sess.run(args.output)}")

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()


if __name__ == "__main__":
    main()
