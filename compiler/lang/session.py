"""Session control for the lcc compiler: compiles either a source file (batch mode) or single lines typed into the
shell, and reports the offending source line to the error handler when compilation fails.
"""

import os

from compiler.compiler import compile_source, compile_syntax
from compiler.lang.error import GenericException, ParseError


class Session:
    """Governs a compilation target: a file on disk, or the command-line pseudo-file SH_FILE."""
    SH_FILE = "<in>"   # command-line compiler filename
    EXTENSION = ".hs"  # default extension of batch mode output

    def __init__(self, error_handler, path=SH_FILE, cmd_line=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode

        if self.cmd_line:
            self.error_handler.fatal = False
        elif path == Session.SH_FILE:
            raise GenericException("'<in>' is a reserved filename")

    def _compile(self, function, source):
        """Runs function on source, registering the offending line in the traceback if an error is raised."""
        try:
            result = function(source)
        except GenericException as error:
            if error.line is not None:
                line = source.splitlines()[error.line - 1]
                if isinstance(error, ParseError):
                    error.locate(line)
                self.error_handler.register_line(self.path, line.strip(), error.line)
            raise

        self.error_handler.remove_line(self.path)  # error was not raised
        return result

    def compile(self, source):
        """Compiles source to Haskell."""
        return self._compile(compile_source, source)

    def syntax(self, source):
        """Parses source into a Program without generating code."""
        return self._compile(compile_syntax, source)

    def read(self):
        """Reads self.path, relative to the current working directory."""
        try:
            with open(os.path.abspath(self.path), "r", encoding="utf-8") as file:
                return file.read()
        except UnicodeDecodeError:
            raise GenericException("'{}' could not be decoded as UTF-8", self.path, diagnosis=False)
        except OSError:
            raise GenericException("'{}' could not be opened", self.path, diagnosis=False)

    def output_path(self):
        """Returns self.path with its extension replaced by EXTENSION."""
        root, __ = os.path.splitext(self.path)
        return root + Session.EXTENSION

    def run(self, output_path=None):
        """Compiles self.path and writes the result to output_path (default: see output_path). Returns the path written.
        """
        if output_path is None:
            output_path = self.output_path()
        if os.path.abspath(output_path) == os.path.abspath(self.path):
            raise GenericException("output file '{}' would overwrite its source", output_path, diagnosis=False)

        code = self.compile(self.read())

        try:
            with open(os.path.abspath(output_path), "w", encoding="utf-8") as file:
                file.write(code)
        except OSError:
            raise GenericException("'{}' could not be written", output_path, diagnosis=False)

        return output_path
