"""Handles interactive/command-line mode for the lcc compiler. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Lambda calculus to Haskell compiler shell."""
    intro = "Lambda calculus compiler :: Haskell backend\nType 'help' for more information, 'quit' to exit."
    prompt = "> "
    COMMANDS = ("quit", "help", "EOF")  # anything else is compiled

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

    def onecmd(self, line):
        """Dispatches line to a do_* method only if it is exactly one of COMMANDS, so that lines like 'help := x;'
        still get compiled.
        """
        if line.strip() in Shell.COMMANDS:
            return super().onecmd(line.strip())
        elif not line.strip():
            return self.emptyline()
        return self.default(line)

    def default(self, line):
        """Compiles arbitrary lambda calculus statements."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            code = self.sess.compile(line)
            if code:
                print(code, file=self.stdout)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the lcc compiler!\n\n"
              "Every line is compiled from lambda calculus to Haskell. Statements end with ';' and \n"
              "are either a λ-term or a named definition.\n\n"
              "Try it out by typing 'id := lambda x. x;'. This will print the Haskell definition \n"
              "'id = \\x -> x'. Next, try typing '(lambda f. lambda x. f x) id;', which prints \n"
              "'(\\f -> \\x -> (f x)) id'. Type 'quit' to exit.", file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits compiler."""
        print(file=self.stdout)
        return self.do_quit(arg)

    def do_quit(self, arg):
        """Exits compiler."""
        return True
