import unittest
from fscli.parser import CommandParser, ParsedCommand, ParseError, Redirection
from fscli.pipeline import Pipeline

class TestCommandParser(unittest.TestCase):
    def test_split_pipeline_simple(self):
        self.assertEqual(CommandParser.split_pipeline("ls -a"), ["ls -a"])

    def test_split_pipeline_multiple(self):
        cmd = "foo | pwd |ls -r"
        self.assertEqual(CommandParser.split_pipeline(cmd), ["foo", "pwd", "ls -r"])

    def test_split_pipeline_empty(self):
        self.assertEqual(CommandParser.split_pipeline(""), [])
        self.assertEqual(CommandParser.split_pipeline("   "), [])
        self.assertEqual(CommandParser.split_pipeline("pwd || pwd"), ["pwd", "pwd"])

    def test_tokenize_no_quoting(self):
        # Quotes are ordinary characters
        self.assertEqual(CommandParser.tokenize('echo "hello world"'), ['echo', '"hello', 'world"'])
        self.assertEqual(CommandParser.tokenize("  echo   a  b "), ["echo", "a", "b"])

    def test_parse_segment(self):
        parsed = CommandParser.parse_segment("mv a.txt b")
        self.assertEqual(parsed, ParsedCommand("mv", ["a.txt", "b"]))
        self.assertIsNone(parsed.redirection)

    def test_parse_redirection_overwrite(self):
        parsed = CommandParser.parse_segment("echo hello > out.txt")
        self.assertEqual(parsed.name, "echo")
        self.assertEqual(parsed.args, ["hello"])
        self.assertEqual(parsed.redirection, Redirection(">", "out.txt"))
        self.assertFalse(parsed.redirection.append)

    def test_parse_redirection_append(self):
        parsed = CommandParser.parse_segment("echo hello >> log.txt")
        self.assertEqual(parsed.args, ["hello"])
        self.assertEqual(parsed.redirection.target, "log.txt")
        self.assertTrue(parsed.redirection.append)

    def test_overwrite_checked_before_append(self):
        parsed = CommandParser.parse_segment("echo a >> first.txt b > second.txt")
        self.assertEqual(parsed.redirection, Redirection(">", "second.txt"))
        self.assertEqual(parsed.args, ["a", ">>", "first.txt", "b"])

    def test_tokens_after_target_are_dropped(self):
        parsed = CommandParser.parse_segment("cat a.txt > out.txt b.txt")
        self.assertEqual(parsed.args, ["a.txt"])
        self.assertEqual(parsed.redirection.target, "out.txt")

    def test_glued_operator_is_not_a_redirection(self):
        parsed = CommandParser.parse_segment("echo hi >out.txt")
        self.assertEqual(parsed.args, ["hi", ">out.txt"])
        self.assertIsNone(parsed.redirection)

    def test_missing_redirection_target(self):
        with self.assertRaises(ParseError) as ctx:
            CommandParser.parse_segment("echo hello >")
        self.assertIn("'>'", str(ctx.exception))

        with self.assertRaises(ParseError) as ctx:
            CommandParser.parse_segment("ls >>")
        self.assertIn("'>>'", str(ctx.exception))

    def test_empty_segment(self):
        with self.assertRaises(ParseError):
            CommandParser.parse_segment("   ")

    def test_ls_options(self):
        options = CommandParser.parse_ls_options(["-a", "-r"])
        self.assertTrue(options.show_all)
        self.assertTrue(options.reverse)
        self.assertIsNone(options.path)

        options = CommandParser.parse_ls_options(["first", "-r", "second"])
        self.assertFalse(options.show_all)
        self.assertTrue(options.reverse)
        self.assertEqual(options.path, "second")

        # Unrecognised flags are positional
        options = CommandParser.parse_ls_options(["-l"])
        self.assertEqual(options.path, "-l")


class TestPipeline(unittest.TestCase):
    def test_segments_run_independently(self):
        pipeline = Pipeline.from_line("a | b | c")
        seen = []

        def run(segment):
            seen.append(segment)
            return 1 if segment == "a" else 0

        self.assertEqual(pipeline.execute(run), 0)
        self.assertEqual(seen, ["a", "b", "c"])
        self.assertEqual(pipeline.exit_codes, [1, 0, 0])
        self.assertEqual(len(pipeline), 3)

    def test_empty_pipeline(self):
        pipeline = Pipeline.from_line("")
        self.assertEqual(pipeline.execute(lambda segment: 1), 0)
        self.assertEqual(pipeline.exit_codes, [])

if __name__ == '__main__':
    unittest.main()
