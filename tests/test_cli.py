"""Tests for the CLI module."""

import json

import pandas as pd
import pytest

from pygraphs.cli import cmd_layout, cmd_pie, create_parser, load_data, main


class TestCLIParser:
    """Tests for CLI argument parsing."""

    def test_parser_pie_command(self):
        parser = create_parser()
        args = parser.parse_args(["pie", "data.csv", "--output", "chart.svg"])

        assert args.command == "pie"
        assert args.file == "data.csv"
        assert args.output == "chart.svg"
        assert args.labels == "percent"
        assert args.donut == 0.0

    def test_parser_pie_with_options(self):
        parser = create_parser()
        args = parser.parse_args([
            "pie", "data.csv",
            "-o", "chart.svg",
            "--key", "region",
            "--value", "amount",
            "--donut", "0.4",
            "--indent", "0.02",
            "--sort", "value",
            "--labels", "key",
            "--width", "300",
            "--padding", "10",
            "--quiet",
        ])

        assert args.key == "region"
        assert args.value == "amount"
        assert args.donut == 0.4
        assert args.indent == 0.02
        assert args.sort == "value"
        assert args.labels == "key"
        assert args.width == 300
        assert args.padding == 10
        assert args.quiet is True

    def test_parser_layout_output_optional(self):
        args = create_parser().parse_args(["layout", "data.csv"])
        assert args.command == "layout"
        assert args.output is None

    def test_pie_requires_output(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["pie", "data.csv"])


class TestLoadData:
    """Tests for data loading functionality."""

    def test_load_csv(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("region,amount\nnorth,3\nsouth,1\n")
        df = load_data(str(path))
        assert list(df.columns) == ["region", "amount"]
        assert len(df) == 2

    def test_load_nonexistent_file(self):
        with pytest.raises(FileNotFoundError):
            load_data("/nonexistent/path/data.csv")

    def test_load_unsupported_format(self, tmp_path):
        path = tmp_path / "data.xyz"
        path.write_text("content")
        with pytest.raises(ValueError, match="Unsupported file format"):
            load_data(str(path))


class TestCLICommands:
    """Tests for CLI command execution."""

    @pytest.fixture
    def sample_csv(self, tmp_path):
        path = tmp_path / "sales.csv"
        pd.DataFrame(
            {
                "region": ["north", "south", "east", "north"],
                "amount": [2, 1, 4, 1],
            }
        ).to_csv(path, index=False)
        return str(path)

    def test_cmd_pie_creates_svg(self, sample_csv, tmp_path):
        output = tmp_path / "chart.svg"
        args = create_parser().parse_args(
            ["pie", sample_csv, "-o", str(output), "--key", "region", "--value", "amount", "-q"]
        )

        assert cmd_pie(args) == 0
        content = output.read_text(encoding="utf-8")
        assert content.startswith("<svg")
        assert content.count('class="pie-segment"') == 3
        assert ">37.5%</text>" in content

    def test_cmd_layout_stdout(self, sample_csv, capsys):
        args = create_parser().parse_args(
            ["layout", sample_csv, "--key", "region", "--value", "amount",
             "--sort", "value", "--donut", "0.5", "-q"]
        )

        assert cmd_layout(args) == 0
        data = json.loads(capsys.readouterr().out)
        # north totals 3 after merging duplicate keys
        assert [s["key"] for s in data["segments"]] == ["east", "north", "south"]
        assert data["total"] == 8.0
        assert data["segments"][0]["inner_radius"] == pytest.approx(60.0)

    def test_cmd_layout_to_file(self, sample_csv, tmp_path):
        output = tmp_path / "layout.json"
        rc = main(["layout", sample_csv, "-o", str(output), "-q"])
        assert rc == 0
        assert json.loads(output.read_text())["segments"]

    def test_missing_file_returns_error(self, tmp_path, capsys):
        rc = main(["pie", str(tmp_path / "nope.csv"), "-o", str(tmp_path / "x.svg")])
        assert rc == 1
        assert "Error:" in capsys.readouterr().err

    def test_missing_column_returns_error(self, sample_csv, tmp_path, capsys):
        rc = main(["pie", sample_csv, "-o", str(tmp_path / "x.svg"), "--value", "nope", "-q"])
        assert rc == 1
        assert "Column not found" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "pygraphs" in capsys.readouterr().out
