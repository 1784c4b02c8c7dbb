import pytest

from pipex.errors import PipexError
from pipex.parsing import Command, parse_args
from pipex.runner import main, run_pipeline


@pytest.fixture
def infile(tmp_path):
    p = tmp_path / "in.txt"
    p.write_text("alpha\nbeta\n")
    return p


def test_run_pipeline_copies_through_cat(tmp_path, infile):
    outfile = tmp_path / "out.txt"
    with parse_args([str(infile), "cat", "cat", str(outfile)]) as pipeline:
        codes = run_pipeline(pipeline)
    assert codes == (0, 0)
    assert outfile.read_text() == infile.read_text()


def test_main_counts_lines(tmp_path, infile):
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "cat", "wc -l", str(outfile)]) == 0
    assert outfile.read_text().strip() == "2"


def test_main_truncates_output(tmp_path, infile):
    outfile = tmp_path / "out.txt"
    outfile.write_text("x" * 1000)
    assert main([str(infile), "cat", "cat", str(outfile)]) == 0
    assert outfile.read_text() == infile.read_text()


def test_main_wrong_argument_count(capsys):
    assert main(["only", "three", "args"]) == 1
    assert capsys.readouterr().err == "invalid number of arguments\n"


def test_main_missing_input(tmp_path, capsys):
    missing = str(tmp_path / "wrongfile")
    assert main([missing, "cat", "wc -l", str(tmp_path / "out")]) == 1
    assert capsys.readouterr().err == "zsh: no such file or directory: " + missing + "\n"


def test_main_unknown_command(tmp_path, infile, capsys):
    assert main([str(infile), "cat", "nosuchcommandxyz", str(tmp_path / "out")]) == 1
    assert capsys.readouterr().err == "zsh: command not found: nosuchcommandxyz\n"


def test_run_pipeline_bad_executable(tmp_path, infile):
    pipeline = parse_args([str(infile), "cat", "cat", str(tmp_path / "out")])
    pipeline.first = Command(["ghost"], str(tmp_path / "ghost"))
    try:
        with pytest.raises(PipexError) as info:
            run_pipeline(pipeline)
    finally:
        pipeline.close()
    assert str(info.value) == "execve() failed"