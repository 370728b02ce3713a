import os
import tempfile
import unittest
from nixbuilder.app_source import AppSource
from nixbuilder.errors import SourceError

class TestAppSource(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.source = self._tmp.name
        for name in ["package.json", "README.md"]:
            with open(os.path.join(self.source, name), "w") as f:
                f.write("{}")
        os.makedirs(os.path.join(self.source, "src"))
        with open(os.path.join(self.source, "src", "index.js"), "w") as f:
            f.write("console.log('hi')")

    def tearDown(self):
        self._tmp.cleanup()

    def test_includes_top_level_file(self):
        app = AppSource.from_path(self.source)
        self.assertTrue(app.includes_file("package.json"))
        self.assertTrue(app.includes_file("README.md"))

    def test_directories_are_entries_too(self):
        app = AppSource.from_path(self.source)
        self.assertTrue(app.includes_file("src"))

    def test_match_is_exact(self):
        app = AppSource.from_path(self.source)
        self.assertFalse(app.includes_file("package"))
        self.assertFalse(app.includes_file("Package.json"))
        self.assertFalse(app.includes_file("*.json"))

    def test_nested_files_are_not_included(self):
        app = AppSource.from_path(self.source)
        self.assertFalse(app.includes_file("index.js"))

    def test_snapshot_is_not_rescanned(self):
        app = AppSource.from_path(self.source)
        with open(os.path.join(self.source, "go.mod"), "w") as f:
            f.write("module example.com/app")
        self.assertFalse(app.includes_file("go.mod"))
        self.assertEqual(len(app.paths), 3)

    def test_read_file(self):
        app = AppSource.from_path(self.source)
        self.assertEqual(app.read_file("package.json"), "{}")

    def test_missing_directory(self):
        with self.assertRaises(SourceError) as ctx:
            AppSource.from_path(os.path.join(self.source, "nope"))
        self.assertIn("Failed to read app source directory", str(ctx.exception))

    def test_source_is_a_file(self):
        with self.assertRaises(SourceError):
            AppSource.from_path(os.path.join(self.source, "README.md"))

if __name__ == "__main__":
    unittest.main()
