import os
import tempfile
import toml
import unittest
from unittest.mock import patch
from nixbuilder import config

class TestConfig(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.test_dir = self._tmp.name
        self.config_path = os.path.join(self.test_dir, config.CONFIG_FILE)
        self.sample_config = {
            "app": {
                "name": "web",
                "build_cmd": "make",
                "pkgs": ["git"],
            },
            "build": {
                "staging_dir": "staging",
            },
        }

    def tearDown(self):
        self._tmp.cleanup()

    def test_load_config_not_found(self):
        """Test that loading a non-existent config returns an empty dict."""
        self.assertEqual(config.load_config(path=self.test_dir), {})

    @patch('nixbuilder.config.logger')
    def test_load_config(self, mock_logger):
        with open(self.config_path, "w") as f:
            toml.dump(self.sample_config, f)
        self.assertEqual(config.load_config(path=self.test_dir), self.sample_config)

    @patch('nixbuilder.config.logger')
    def test_load_invalid_config(self, mock_logger):
        with open(self.config_path, "w") as f:
            f.write("[app\nname = ")
        self.assertEqual(config.load_config(path=self.test_dir), {})
        mock_logger.error.assert_called_once()

    def test_parse_pkgs(self):
        self.assertEqual(config.parse_pkgs("git, curl,,jq "), ["git", "curl", "jq"])
        self.assertEqual(config.parse_pkgs(None), [])
        self.assertEqual(config.parse_pkgs(""), [])

    def test_resolve_defaults(self):
        options = config.resolve_build_options({})
        self.assertEqual(options, {
            "name": None,
            "custom_build_cmd": None,
            "custom_start_cmd": None,
            "pkgs": [],
            "staging_root": "tmp",
        })

    def test_resolve_from_file(self):
        options = config.resolve_build_options(self.sample_config)
        self.assertEqual(options["name"], "web")
        self.assertEqual(options["custom_build_cmd"], "make")
        self.assertIsNone(options["custom_start_cmd"])
        self.assertEqual(options["pkgs"], ["git"])
        self.assertEqual(options["staging_root"], "staging")

    def test_cli_values_win(self):
        options = config.resolve_build_options(
            self.sample_config, name="api", build_cmd="", start_cmd="./run", pkgs=["curl"])
        self.assertEqual(options["name"], "api")
        self.assertEqual(options["custom_build_cmd"], "")
        self.assertEqual(options["custom_start_cmd"], "./run")
        self.assertEqual(options["pkgs"], ["git", "curl"])

    def test_pkgs_as_string(self):
        options = config.resolve_build_options({"app": {"pkgs": "git, curl"}})
        self.assertEqual(options["pkgs"], ["git", "curl"])

if __name__ == "__main__":
    unittest.main()
