from pathlib import Path

from typer.testing import CliRunner

from buffered_tee.cli import app

runner = CliRunner()


def test_cli_sorts_and_dedupes_into_file(tmp_path: Path):
    source, sink = tmp_path / "in.txt", tmp_path / "out.txt"
    source.write_text("b\na\nb\n")
    result = runner.invoke(app, ["-i", str(source), "-o", str(sink), "-u", "-q"])
    assert result.exit_code == 0, result.output
    assert sink.read_text() == "a\nb\n"


def test_cli_fans_out_to_two_files(tmp_path: Path):
    first, second = tmp_path / "x.txt", tmp_path / "y.txt"
    first.write_text("x\n")
    second.write_text("y\n")
    sink_a, sink_b = tmp_path / "a.txt", tmp_path / "b.txt"
    result = runner.invoke(
        app,
        ["-i", str(first), "-i", str(second), "-o", str(sink_a), "-o", str(sink_b), "-p"],
    )
    assert result.exit_code == 0, result.output
    assert sink_a.read_text() == "x\ny\n"
    assert sink_b.read_text() == "x\ny\n"


def test_cli_reads_stdin_and_writes_stdout():
    result = runner.invoke(app, ["-i", "-", "-o", "-", "-q", "-s"], input="c\na\nb\n")
    assert result.exit_code == 0
    assert result.stdout == "a\nb\nc\n"


def test_cli_empty_input_exits_cleanly(tmp_path: Path):
    sink = tmp_path / "out.txt"
    result = runner.invoke(app, ["-o", str(sink), "-p"], input="")
    assert result.exit_code == 0
    assert not sink.exists()


def test_cli_missing_input_exits_with_error(tmp_path: Path):
    sink = tmp_path / "out.txt"
    missing = tmp_path / "missing.txt"
    result = runner.invoke(app, ["-i", str(missing), "-o", str(sink), "-q"])
    assert result.exit_code == 1
    assert not sink.exists()
    assert "Error opening input file" in result.output


def test_cli_unwritable_output_exits_with_error(tmp_path: Path):
    source = tmp_path / "in.txt"
    source.write_text("a\n")
    result = runner.invoke(
        app, ["-i", str(source), "-o", str(tmp_path / "no-dir" / "out.txt")]
    )
    assert result.exit_code == 1
    assert "Error opening output file" in result.output


def test_cli_reads_defaults_from_yaml(tmp_path: Path):
    source, sink = tmp_path / "in.txt", tmp_path / "out.txt"
    source.write_text("z\ny\nz\n")
    config_path = tmp_path / "tee.yaml"
    config_path.write_text(
        f"inputs: ['{source}']\noutputs: ['{sink}']\nunique: true\nquiet: true\n"
    )
    result = runner.invoke(app, ["--config", str(config_path)])
    assert result.exit_code == 0, result.output
    assert sink.read_text() == "y\nz\n"


def test_cli_rejects_bad_config_file(tmp_path: Path):
    config_path = tmp_path / "tee.yaml"
    config_path.write_text("bogus: 1\n")
    result = runner.invoke(app, ["--config", str(config_path)])
    assert result.exit_code == 2


def test_cli_rejects_negative_redux():
    result = runner.invoke(app, ["-r", "-3"], input="a\n")
    assert result.exit_code == 2


def test_cli_warns_that_redux_is_ignored_when_quiet(tmp_path: Path):
    source, sink = tmp_path / "in.txt", tmp_path / "out.txt"
    source.write_text("a\n")
    result = runner.invoke(app, ["-i", str(source), "-o", str(sink), "-q", "-r", "5"])
    assert result.exit_code == 0
    assert "--redux option is ignored" in result.output
    assert "lines written" not in result.output
    assert sink.read_text() == "a\n"


def test_cli_reports_missing_outputs_even_when_quiet(tmp_path: Path):
    source = tmp_path / "in.txt"
    source.write_text("a\n")
    result = runner.invoke(app, ["-i", str(source), "-q"])
    assert result.exit_code == 0
    assert "No output files specified" in result.output


def test_cli_rejects_badly_typed_config_values(tmp_path: Path):
    config_path = tmp_path / "tee.yaml"
    for body in ("redux: lots\n", "inputs: 5\n", "sort: 'false'\n"):
        config_path.write_text(body)
        result = runner.invoke(app, ["--config", str(config_path)], input="b\na\n")
        assert result.exit_code == 2, body
