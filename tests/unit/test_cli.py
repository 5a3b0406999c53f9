#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the acrodoc command line interface."""
import pytest

from acrodoc.cli import EXIT_ERROR, EXIT_SUCCESS, create_parser, main

pytestmark = pytest.mark.usefixtures("restore_package_logger")

CONFIG = """\
acronyms:
  sorting: initial
  keys:
    - key: RL
      shortname: RL
      longname: Reinforcement Learning
    - key: CPU
      shortname: CPU
      longname: Central Processing Unit
    - key: API
      shortname: API
      longname: Application Programming Interface
"""


@pytest.fixture
def config_file(write_config):
    """Provide a YAML configuration file with three acronyms."""
    return write_config("acronyms.yaml", CONFIG)


@pytest.mark.unit
@pytest.mark.cli
class TestParser:
    """Test argument parsing."""

    def test_list_arguments(self) -> None:
        """Test the list command arguments."""
        args = create_parser().parse_args(["list", "a.yaml", "--sorting", "usage", "--only-used", "--rich"])

        assert args.command == "list"
        assert args.config == "a.yaml"
        assert args.sorting == "usage"
        assert args.include_unused is False
        assert args.rich is True

    def test_include_unused_defaults_to_config(self) -> None:
        """Test that include_unused is unset unless given."""
        assert create_parser().parse_args(["list"]).include_unused is None

    def test_invalid_style_is_usage_error(self, capsys) -> None:
        """Test that argument errors exit with status 2."""
        assert main(["expand", "doc.md", "--style", "fancy"]) == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_missing_command(self) -> None:
        """Test that a command is required."""
        assert main([]) == 2


@pytest.mark.unit
@pytest.mark.cli
class TestListCommand:
    """Test the list command."""

    def test_list_plain(self, config_file, capsys) -> None:
        """Test the plain listing in definition order."""
        assert main(["list", str(config_file)]) == EXIT_SUCCESS

        lines = capsys.readouterr().out.splitlines()
        assert [line.split("\t")[0] for line in lines] == ["RL", "CPU", "API"]
        assert lines[0] == "RL\tRL\tReinforcement Learning\t#acronyms_RL"

    def test_list_alphabetical_override(self, config_file, capsys) -> None:
        """Test overriding the sorting criterion."""
        assert main(["list", str(config_file), "--sorting", "alphabetical"]) == EXIT_SUCCESS

        keys = [line.split("\t")[0] for line in capsys.readouterr().out.splitlines()]
        assert keys == ["API", "CPU", "RL"]

    def test_list_usage_after_document(self, config_file, tmp_path, capsys) -> None:
        """Test usage sorting of the acronyms referenced in a document."""
        document = tmp_path / "doc.md"
        document.write_text(r"\acr{CPU} then \acr{RL} and \acr{CPU}", encoding="utf-8")

        code = main(["list", str(config_file), "--sorting", "usage", "--only-used", "--document", str(document)])

        assert code == EXIT_SUCCESS
        keys = [line.split("\t")[0] for line in capsys.readouterr().out.splitlines()]
        assert keys == ["CPU", "RL"]

    def test_list_usage_with_unused_fails(self, config_file, capsys) -> None:
        """Test that usage sorting with unused acronyms is an error."""
        assert main(["list", str(config_file), "--sorting", "usage"]) == EXIT_ERROR
        assert "include_unused" in capsys.readouterr().err

    def test_list_rich(self, config_file, monkeypatch, capsys) -> None:
        """Test the rich table output."""
        monkeypatch.setenv("COLUMNS", "200")
        assert main(["list", str(config_file), "--rich"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "Reinforcement Learning" in out
        assert "acronyms_CPU" in out

    def test_list_discovers_config(self, tmp_path, monkeypatch, capsys) -> None:
        """Test configuration discovery from the working directory."""
        (tmp_path / ".acrodoc.yaml").write_text(CONFIG, encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert main(["list"]) == EXIT_SUCCESS
        assert "CPU" in capsys.readouterr().out

    def test_missing_config_file(self, tmp_path, capsys) -> None:
        """Test that a missing configuration file is an error."""
        assert main(["list", str(tmp_path / "missing.yaml")]) == EXIT_ERROR
        assert "does not exist" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestExpandCommand:
    """Test the expand command."""

    def test_expand_to_stdout(self, config_file, tmp_path, capsys) -> None:
        """Test expansion written to standard output."""
        document = tmp_path / "doc.md"
        document.write_text(r"\acr{RL} and \acr{RL}", encoding="utf-8")

        assert main(["expand", str(document), "-c", str(config_file), "--no-links"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "Reinforcement Learning (RL) and RL"

    def test_expand_to_file_with_style(self, config_file, tmp_path) -> None:
        """Test expansion written to a file with a style override."""
        document = tmp_path / "doc.md"
        document.write_text("# Intro\n\n\\acr{API}\n", encoding="utf-8")
        output = tmp_path / "out.md"

        code = main(["expand", str(document), "-c", str(config_file), "-o", str(output), "--style", "short-long"])

        assert code == EXIT_SUCCESS
        assert output.read_text(encoding="utf-8") == (
            "# Intro\n\n[API (Application Programming Interface)](#acronyms_API)\n"
        )

    def test_expand_unknown_reference_option(self, config_file, tmp_path, capsys) -> None:
        """Test that invalid reference options are reported."""
        document = tmp_path / "doc.md"
        document.write_text(r"\acr[colour=red]{RL}", encoding="utf-8")

        assert main(["expand", str(document), "-c", str(config_file)]) == EXIT_ERROR
        assert "colour" in capsys.readouterr().err

    def test_expand_missing_input(self, config_file, tmp_path) -> None:
        """Test that an unreadable input file is an error."""
        assert main(["expand", str(tmp_path / "none.md"), "-c", str(config_file)]) == EXIT_ERROR
