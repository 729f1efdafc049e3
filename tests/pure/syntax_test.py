import dataclasses
import unittest

from compiler.pure.syntax import Abstr, Apply, Call, Definition, LambdaTerm, Program, VarDecl


class VarDeclTestCase(unittest.TestCase):

    def test_init(self):
        should_raise = ["", "x1", "f_g", "λ", "x y", "é"]
        for case in should_raise:
            self.assertRaises(ValueError, VarDecl, case)

        should_pass = ["x", "abc", "lambda", "T"]
        for case in should_pass:
            self.assertEqual(case, VarDecl(case).name)

    def test_definition_name(self):
        self.assertRaises(ValueError, Definition, "f1", Call(VarDecl("x")))

    def test_immutable(self):
        term = Apply(Call(VarDecl("f")), Call(VarDecl("x")))
        with self.assertRaises(dataclasses.FrozenInstanceError):
            term.left = Call(VarDecl("g"))


class DisplayTestCase(unittest.TestCase):

    def test_nodes(self):
        x = VarDecl("x")
        self.assertEqual([], x.nodes)
        self.assertEqual([x], Call(x).nodes)
        self.assertEqual([x, Call(x)], Abstr(x, Call(x)).nodes)
        self.assertEqual([VarDecl("id"), Call(x)], Definition("id", Call(x)).nodes)

    def test_display(self):
        program = Program([Definition("id", Abstr(VarDecl("x"), Call(VarDecl("x")))), LambdaTerm(Call(VarDecl("y")))])
        expected = (
            "Program(nodes=[\n"
            "    Definition(nodes=[\n"
            "        VarDecl('id'),\n"
            "        Abstr(nodes=[\n"
            "            VarDecl('x'),\n"
            "            Call(nodes=[\n"
            "                VarDecl('x')\n"
            "            ])\n"
            "        ])\n"
            "    ]),\n"
            "    LambdaTerm(nodes=[\n"
            "        Call(nodes=[\n"
            "            VarDecl('y')\n"
            "        ])\n"
            "    ])\n"
            "])"
        )
        self.assertEqual(expected, program.display())
        self.assertEqual("Program()", Program().display())


if __name__ == '__main__':
    unittest.main()
