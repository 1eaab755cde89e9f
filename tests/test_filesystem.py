import os
import tempfile
import unittest
from fscli.context import Session
from fscli.filesystem import LocalFileSystem

class TestLocalFileSystem(unittest.TestCase):
    def setUp(self):
        self._tmpdir = tempfile.TemporaryDirectory()
        self.tmpdir = self._tmpdir.name
        self.fs = LocalFileSystem()

    def tearDown(self):
        self._tmpdir.cleanup()

    def path(self, *parts):
        return os.path.join(self.tmpdir, *parts)

    def test_directories(self):
        self.assertTrue(self.fs.create_directory(self.path("d")))
        self.assertFalse(self.fs.create_directory(self.path("d")))
        self.assertFalse(self.fs.create_directory(self.path("x", "y")))
        self.assertTrue(self.fs.is_directory(self.path("d")))
        self.assertEqual(self.fs.list_entries(self.tmpdir), ["d"])

        open(self.path("d", "f"), "w").close()
        self.assertFalse(self.fs.delete_empty_directory(self.path("d")))
        os.remove(self.path("d", "f"))
        self.assertTrue(self.fs.delete_empty_directory(self.path("d")))
        self.assertFalse(self.fs.delete_empty_directory(self.path("d")))

    def test_files(self):
        target = self.path("f.txt")
        self.assertTrue(self.fs.create_empty_file(target))
        self.assertFalse(self.fs.create_empty_file(target))
        self.assertTrue(self.fs.exists(target))
        self.assertFalse(self.fs.is_directory(target))
        self.assertTrue(self.fs.delete_file(target))
        self.assertFalse(self.fs.delete_file(target))

        with self.assertRaises(OSError):
            self.fs.create_empty_file(self.path("missing", "f.txt"))

    def test_read_and_write(self):
        target = self.path("log.txt")
        with self.fs.open_for_write(target) as f:
            f.write("a\nb")
        with self.fs.open_for_write(target, append=True) as f:
            f.write("c\n")
        self.assertEqual(list(self.fs.read_lines(target)), ["a", "bc"])

        with self.assertRaises(OSError):
            list(self.fs.read_lines(self.path("missing.txt")))

    def test_move(self):
        open(self.path("src"), "w").close()
        with open(self.path("dst"), "w") as f:
            f.write("old")
        self.fs.move(self.path("src"), self.path("dst"))
        self.assertFalse(self.fs.exists(self.path("src")))
        self.assertEqual(os.path.getsize(self.path("dst")), 0)

        with self.assertRaises(OSError):
            self.fs.move(self.path("missing"), self.path("other"))


class TestSession(unittest.TestCase):
    def test_resolve_path(self):
        session = Session(cwd=os.path.join(os.sep, "work", "dir"))
        self.assertEqual(session.resolve_path("a.txt"), os.path.join(os.sep, "work", "dir", "a.txt"))
        self.assertEqual(session.resolve_path("../b"), os.path.join(os.sep, "work", "b"))
        self.assertEqual(session.resolve_path(os.path.join(os.sep, "etc")), os.path.join(os.sep, "etc"))
        self.assertEqual(session.resolve_path(""), session.cwd)

if __name__ == '__main__':
    unittest.main()
