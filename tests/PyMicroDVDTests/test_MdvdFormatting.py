import unittest

from PyMicroDVD.MdvdFormatting import MdvdFormatting, lowercase_first_char, uppercase_first_char
from PyMicroDVD.Helpers.TestCases import LoggedTestCase

class TestMdvdFormatting(LoggedTestCase):
    case_cases = [
        ("y:i", "y:i", "Y:i"),
        ("Y:i", "y:i", "Y:i"),
        ("C:$0000FF", "c:$0000FF", "C:$0000FF"),
        ("f:DejaVuSans", "f:DejaVuSans", "F:DejaVuSans"),
        ("", "", ""),
    ]

    def test_FirstCharCase(self):
        for value, lower, upper in self.case_cases:
            with self.subTest(value=value):
                self.assertLoggedEqual("lowercase first char", lower, lowercase_first_char(value), input_value=value)
                self.assertLoggedEqual("uppercase first char", upper, uppercase_first_char(value), input_value=value)

    def test_Normalization(self):
        formatting = MdvdFormatting("Y:B,u")
        self.assertLoggedEqual("normalized value", "y:B,u", formatting.value)
        self.assertLoggedEqual("str", "y:B,u", str(formatting))

    def test_IdentityIgnoresFirstCharCase(self):
        self.assertLoggedEqual("equal", MdvdFormatting("y:i"), MdvdFormatting("Y:i"))
        self.assertNotEqual(MdvdFormatting("y:i"), MdvdFormatting("y:I"))
        self.assertLoggedEqual("set size", 1, len({ MdvdFormatting("y:i"), MdvdFormatting("Y:i") }))

    def test_IsGroupFormatting(self):
        cases = [
            ("Y:i", True),
            ("y:i", False),
            ("C:$0000ff", True),
            ("1x", False),
            ("$x", False),
            ("", False),
        ]
        for value, expected in cases:
            with self.subTest(value=value):
                self.assertLoggedEqual("is group formatting", expected, MdvdFormatting.is_group_formatting(value), input_value=value)

    def test_Render(self):
        formatting = MdvdFormatting("y:i")
        self.assertLoggedEqual("group scoped", "Y:i", formatting.to_formatting_string(True))
        self.assertLoggedEqual("line scoped", "y:i", formatting.to_formatting_string(False))
        self.assertLoggedEqual("group tag", "{Y:i}", formatting.to_tag(True))
        self.assertLoggedEqual("line tag", "{y:i}", formatting.to_tag(False))

    def test_RenderIgnoresParsedScope(self):
        formatting = MdvdFormatting("Y:i")
        self.assertLoggedEqual("line scoped from group tag", "y:i", formatting.to_formatting_string(False))

    def test_CanGroup(self):
        self.assertLoggedTrue("letter can group", MdvdFormatting("y:i").can_group)
        self.assertLoggedFalse("digit cannot group", MdvdFormatting("1x").can_group)
        self.assertLoggedFalse("symbol cannot group", MdvdFormatting("$x").can_group)
        self.assertLoggedFalse("empty cannot group", MdvdFormatting("").can_group)

    def test_Ordering(self):
        tags = sorted([ MdvdFormatting("y:i"), MdvdFormatting("c:$ff"), MdvdFormatting("Y:b") ])
        self.assertLoggedSequenceEqual("sorted", ["c:$ff", "y:b", "y:i"], [ tag.value for tag in tags ])

if __name__ == '__main__':
    unittest.main()
