import contextlib
import io
import os
import tempfile
import unittest

from compiler.main import main


class MainTestCase(unittest.TestCase):

    def setUp(self):
        self.cwd = os.getcwd()
        self.tmp = tempfile.TemporaryDirectory()
        os.chdir(self.tmp.name)

        with open("script.lc", "w") as file:
            file.write("id := lambda x. x;\nid y;\n")

    def tearDown(self):
        os.chdir(self.cwd)
        self.tmp.cleanup()

    def run_main(self, argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            main(argv)
        return out.getvalue()

    def test_batch(self):
        self.assertIn("script.lc -> script.hs", self.run_main(["script.lc"]))
        with open("script.hs") as file:
            self.assertEqual("id = \\x -> x\nid y", file.read())

    def test_output(self):
        self.run_main(["script.lc", "-o", "out.hs"])
        self.assertTrue(os.path.exists("out.hs"))
        self.assertFalse(os.path.exists("script.hs"))

    def test_ast(self):
        output = self.run_main(["script.lc", "--ast"])
        self.assertTrue(output.startswith("Program(nodes=["))
        self.assertIn("VarDecl('id')", output)
        self.assertFalse(os.path.exists("script.hs"))

    def test_options_require_file(self):
        should_raise = [["-o", "out.hs"], ["--ast"]]
        for case in should_raise:
            with contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit) as context:
                    main(case)
            self.assertEqual(2, context.exception.code, case)

    def test_error(self):
        with open("bad.lc", "w") as file:
            file.write("lambda x x;")

        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            with self.assertRaises(SystemExit) as context:
                main(["bad.lc"])
        self.assertEqual(1, context.exception.code)
        self.assertIn("error: ", out.getvalue())


if __name__ == '__main__':
    unittest.main()
