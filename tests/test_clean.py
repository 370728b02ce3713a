import os
from click.testing import CliRunner
from nixbuilder.main import cli

def test_clean_command():
    """Test that the clean command removes staged workspaces."""
    runner = CliRunner()
    with runner.isolated_filesystem():
        for workspace in ["a1", "b2"]:
            os.makedirs(os.path.join("tmp", workspace))
            with open(os.path.join("tmp", workspace, "Dockerfile"), "w") as f:
                f.write("FROM nixos/nix\n")

        result = runner.invoke(cli, ["clean", "--yes"])

        assert result.exit_code == 0
        assert os.path.isdir("tmp")
        assert os.listdir("tmp") == []

def test_clean_asks_for_confirmation():
    runner = CliRunner()
    with runner.isolated_filesystem():
        os.makedirs(os.path.join("tmp", "a1"))

        result = runner.invoke(cli, ["clean"], input="n\n")

        assert result.exit_code == 1
        assert os.listdir("tmp") == ["a1"]

def test_clean_custom_staging_dir():
    runner = CliRunner()
    with runner.isolated_filesystem():
        os.makedirs(os.path.join("staging", "a1"))

        result = runner.invoke(cli, ["clean", "--staging-dir", "staging", "-y"])

        assert result.exit_code == 0
        assert os.listdir("staging") == []

def test_clean_nothing_to_do():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ["clean"])
        assert result.exit_code == 0
