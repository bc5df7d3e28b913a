"""End-to-end tests for the click entry point."""

import json

import pytest
from click.testing import CliRunner

from beaver import __version__
from beaver.cli import main


@pytest.fixture
def runner():
    return CliRunner()


def read_store(isolated_home):
    return json.loads((isolated_home / "todos.json").read_text(encoding="utf-8"))


class TestMain:
    """Test dispatch and exit codes."""

    def test_no_command_shows_quick_help(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == 0
        assert "Quick Start" in result.output

    def test_blank_command_shows_quick_help(self, runner):
        result = runner.invoke(main, ["  "])
        assert result.exit_code == 0
        assert "Quick Start" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_unknown_command(self, runner):
        result = runner.invoke(main, ["blabla"])
        assert result.exit_code == 1
        assert "Unknown command 'blabla'" in result.output

    def test_delete_is_not_supported(self, runner, isolated_home):
        result = runner.invoke(main, ["delete", "1"])
        assert result.exit_code == 1
        assert "use remove" in result.output
        assert not (isolated_home / "todos.json").exists()

    def test_validation_error_exits_with_failure(self, runner, isolated_home):
        result = runner.invoke(main, ["add"])
        assert result.exit_code == 1
        assert "Command failed: Title is required" in result.output
        assert not (isolated_home / "todos.json").exists()

    def test_not_found(self, runner):
        result = runner.invoke(main, ["done", "5"])
        assert result.exit_code == 1
        assert "Unable to find the todo with id 5" in result.output


class TestWorkflow:
    """Test commands working together through the command line."""

    def test_add_list_done(self, runner, isolated_home):
        result = runner.invoke(main, ["add", "Buy", "milk", "-p=H"])
        assert result.exit_code == 0
        assert "The todo Buy milk has been added with id 1!" in result.output

        result = runner.invoke(main, ["add", "Walk", "the", "dog"])
        assert result.exit_code == 0

        result = runner.invoke(main, ["list"])
        assert result.exit_code == 0
        assert result.output.index("Buy milk") < result.output.index("Walk the dog")

        result = runner.invoke(main, ["done", "1"])
        assert result.exit_code == 0
        assert "The todo Buy milk has been completed!" in result.output

        result = runner.invoke(main, ["list"])
        assert "Buy milk" not in result.output

        result = runner.invoke(main, ["list", "--all"])
        assert "Buy milk" in result.output

        stored = read_store(isolated_home)
        assert [(t["id"], t["title"], t["completed"]) for t in stored] == [
            (1, "Buy milk", True),
            (2, "Walk the dog", False),
        ]

    def test_options_after_title_are_parsed(self, runner, isolated_home):
        runner.invoke(main, ["add", "Pay", "rent", "--priority=m"])
        runner.invoke(main, ["edit", "1", "-t=Pay", "the", "rent"])
        stored = read_store(isolated_home)
        assert stored[0]["title"] == "Pay the rent"
        assert stored[0]["priority"] == "Medium"

    def test_remove_prompts(self, runner, isolated_home):
        runner.invoke(main, ["add", "Temporary"])

        result = runner.invoke(main, ["remove", "1"], input="n\n")
        assert result.exit_code == 0
        assert len(read_store(isolated_home)) == 1

        result = runner.invoke(main, ["remove", "1"], input="y\n")
        assert result.exit_code == 0
        assert "The todo with id 1 has been removed!" in result.output
        assert read_store(isolated_home) == []

    def test_purge_prompts(self, runner, isolated_home):
        runner.invoke(main, ["add", "One"])
        runner.invoke(main, ["done", "1"])
        result = runner.invoke(main, ["purge"], input="y\n")
        assert result.exit_code == 0
        assert "delete 1 completed todos?" in result.output
        assert read_store(isolated_home) == []

    def test_fetch_and_next(self, runner):
        runner.invoke(main, ["add", "Low", "one"])
        runner.invoke(main, ["add", "Urgent", "one", "-p=h"])

        result = runner.invoke(main, ["next"])
        assert result.exit_code == 0
        assert "Title: Urgent one" in result.output

        result = runner.invoke(main, ["fetch", "1"])
        assert result.exit_code == 0
        assert "Title: Low one" in result.output

    def test_empty_list(self, runner):
        result = runner.invoke(main, ["list"])
        assert result.exit_code == 0
        assert "Your todo list is empty! :)" in result.output

    def test_corrupt_store_fails_cleanly(self, runner, isolated_home):
        isolated_home.mkdir()
        (isolated_home / "todos.json").write_text("{broken", encoding="utf-8")
        result = runner.invoke(main, ["list"])
        assert result.exit_code == 1
        assert "Command failed" in result.output


class TestConfigOption:
    """Test the --config shell option."""

    def test_config_file_sets_default_priority(self, runner, isolated_home, tmp_path):
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("default_priority: High\n", encoding="utf-8")

        result = runner.invoke(main, ["--config", str(config_file), "add", "Important"])
        assert result.exit_code == 0
        assert read_store(isolated_home)[0]["priority"] == "High"

    def test_confirmation_can_be_disabled(self, runner, isolated_home, tmp_path):
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("confirm_deletion: false\n", encoding="utf-8")

        runner.invoke(main, ["add", "Temporary"])
        result = runner.invoke(main, ["--config", str(config_file), "remove", "1"])
        assert result.exit_code == 0
        assert read_store(isolated_home) == []
