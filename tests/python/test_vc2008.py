"""Unit tests for VC++ 2008 command-line splitting and quoting."""

import unittest
from winargs.vc2008 import join, quote, split


class TestSplit(unittest.TestCase):
    """Test splitting with the C runtime rules."""

    def test_single_word(self):
        """Test a single plain word."""
        self.assertEqual(["word"], split("word"))

    def test_program_path(self):
        """Test that backslashes in a path are kept."""
        self.assertEqual([r"C:\path\to\program.exe"], split(r"C:\path\to\program.exe"))

    def test_quoted_path(self):
        """Test a quoted path followed by arguments."""
        tokens = split(r'"C:\path\to the\program.exe" arg -arg2 --arg3')
        self.assertEqual([r"C:\path\to the\program.exe", "arg", "-arg2", "--arg3"], tokens)

    def test_multiple_args(self):
        """Test whitespace-separated arguments."""
        self.assertEqual(["one", "two", "three"], split("one two three"))

    def test_multiple_args_with_quotes(self):
        """Test quoted arguments between plain ones."""
        self.assertEqual(["one", "two and uh", "three"], split('one "two and uh" three'))

    def test_empty_string(self):
        """Test empty string returns empty list."""
        self.assertEqual([], split(""))

    def test_whitespace_only(self):
        """Test whitespace-only string returns empty list."""
        self.assertEqual([], split("   \t  \r\n  \0 "))

    def test_leading_and_trailing_whitespace(self):
        """Test tabs and spaces around arguments are dropped."""
        self.assertEqual(["a", "b", "c"], split(" \ta \tb\t c\t "))

    def test_null_is_a_delimiter(self):
        """Test the null character separates arguments."""
        self.assertEqual(["a", "b"], split("a\0b"))

    def test_plain_words_split_on_whitespace(self):
        """Test that lines without quotes or backslashes split like str.split."""
        for line in ["a b", "  lots   of\tspace  ", "x\ny\rz", "single"]:
            self.assertEqual(line.split(), split(line))

    def test_escaped_quotes(self):
        """Test backslash-escaped quotes are literal."""
        tokens = split(r'one \"two\" "three four" five')
        self.assertEqual(["one", '"two"', "three four", "five"], tokens)

    def test_backslashes_without_quote_are_literal(self):
        """Test a backslash run not followed by a quote is copied as is."""
        self.assertEqual(["\\\\\\\\"], split("\\\\\\\\"))
        self.assertEqual([r"a\\\b"], split(r"a\\\b"))
        self.assertEqual([r"a\\\b"], split(r'"a\\\b"'))

    def test_trailing_backslashes(self):
        """Test backslashes at the end of the line are kept."""
        self.assertEqual(["a\\\\"], split("a\\\\"))

    def test_even_backslashes_before_quote(self):
        """Test 2n backslashes before a quote give n and start a quoted part."""
        for n in range(4):
            line = "a" + "\\" * (2 * n) + '"b c"'
            self.assertEqual(["a" + "\\" * n + "b c"], split(line))

    def test_odd_backslashes_before_quote(self):
        """Test 2n+1 backslashes before a quote give n and a literal quote."""
        for n in range(4):
            line = "a" + "\\" * (2 * n + 1) + '"b c'
            self.assertEqual(["a" + "\\" * n + '"b', "c"], split(line))

    def test_escaped_backslashes_and_quote(self):
        """Test five backslashes before a quote."""
        self.assertEqual(['\\\\"', "some", "quote"], split('\\\\\\\\\\" some quote '))

    def test_closing_quote_followed_by_quote(self):
        """Test "" inside a quoted part keeps the part open."""
        self.assertEqual(["one", 'two" three'], split('one "two"" three'))

    def test_unterminated_quote(self):
        """Test an unterminated quoted part is closed at the end."""
        self.assertEqual(["one", "two three "], split('one "two three '))

    def test_empty_quotes_are_an_argument(self):
        """Test "" yields an empty argument."""
        self.assertEqual(["one", "", "three"], split('one "" three'))
        self.assertEqual([""], split('""'))
        self.assertEqual(["", ""], split('"" ""'))


class TestDavidDeleyExamples(unittest.TestCase):
    """Examples from the published C runtime parsing rules."""

    def test_examples(self):
        """Test the basic examples."""
        self.assertEqual(["CallMeIshmael"], split("CallMeIshmael"))
        self.assertEqual(["Call Me Ishmael"], split('"Call Me Ishmael"'))
        self.assertEqual(["Call Me Ishmael"], split('Cal"l Me I"shmael'))
        self.assertEqual(['CallMe"Ishmael'], split(r'CallMe\"Ishmael'))
        self.assertEqual(['CallMe"Ishmael'], split(r'"CallMe\"Ishmael"'))
        self.assertEqual([r'CallMe\"Ishmael'], split(r'"CallMe\\\"Ishmael"'))

    def test_common_tasks(self):
        """Test quotes and trailing backslashes inside arguments."""
        self.assertEqual(['"Call Me Ishmael"'], split(r'"\"Call Me Ishmael\""'))
        self.assertEqual(["C:\\TEST A\\"], split(r'"C:\TEST A\\"'))
        self.assertEqual(['"C:\\TEST A\\"'], split(r'"\"C:\TEST A\\\""'))

    def test_explained_examples(self):
        """Test the explained examples."""
        self.assertEqual(["a b c", "d", "e"], split('"a b c"  d  e'))
        self.assertEqual(['ab"c', "\\", "d"], split(r'"ab\"c"  "\\"  d'))
        self.assertEqual([r"a\\\b", "de fg", "h"], split(r'a\\\b d"e f"g h'))
        self.assertEqual([r'a\"b', "c", "d"], split(r'a\\\"b c d'))
        self.assertEqual([r"a\\b c", "d", "e"], split(r'a\\\\"b c" d e'))

    def test_double_double_quotes(self):
        """Test "" while inside a quoted part."""
        self.assertEqual(['a b c"'], split('"a b c""'))
        self.assertEqual(['"CallMeIshmael"', "b", "c"], split('"""CallMeIshmael"""  b  c'))
        self.assertEqual(
            ['"Call', "Me", "Ishmael", "b", "c"], split('""""Call Me Ishmael"" b c')
        )

    def test_triple_double_quotes(self):
        """Test three quotes on each side give a quoted argument."""
        self.assertEqual(['"Call Me Ishmael"'], split('"""Call Me Ishmael"""'))
        self.assertEqual(['"Call Me Ishmael"'], split(r'\""Call Me Ishmael"\"'))
        self.assertEqual(['"Call Me Ishmael"'], split(r'"\"Call Me Ishmael\""'))

    def test_quadruple_double_quotes(self):
        """Test four quotes on each side close the quoted part early."""
        expected = ['"Call', "Me", 'Ishmael"']
        self.assertEqual(expected, split('""""Call Me Ishmael""""'))
        self.assertEqual(expected, split(r'\"Call Me Ishmael\"'))


class TestQuote(unittest.TestCase):
    """Test quoting values for the C runtime rules."""

    def test_plain_value_is_unchanged(self):
        """Test values without special characters are not quoted."""
        self.assertEqual("hello", quote("hello"))
        self.assertEqual(r"C:\dir\file", quote(r"C:\dir\file"))

    def test_empty_value(self):
        """Test the empty value becomes a pair of quotes."""
        self.assertEqual('""', quote(""))

    def test_whitespace(self):
        """Test values with whitespace are wrapped in quotes."""
        self.assertEqual('"hello world"', quote("hello world"))

    def test_quotes_and_backslashes(self):
        """Test backslashes before quotes are doubled."""
        self.assertEqual(r'"\""', quote('"'))
        self.assertEqual(r'"\\\""', quote('\\"'))
        self.assertEqual('"C:\\Program Files\\\\"', quote("C:\\Program Files\\"))

    def test_round_trip(self):
        """Test split gives back every quoted value."""
        values = [
            "",
            "plain",
            "with space",
            'with "quotes"',
            "trailing\\",
            "trailing space\\",
            '\\\\"',
            "tab\tand\nnewline",
            '"""',
            "\\\\server\\share\\",
        ]
        for value in values:
            self.assertEqual([value], split(quote(value)), value)

    def test_join_round_trip(self):
        """Test split inverts join for a list of arguments."""
        args = ["prog.exe", "", "a b", 'c"d', "e\\", "f\\ g"]
        self.assertEqual(args, split(join(args)))


if __name__ == "__main__":
    unittest.main()
