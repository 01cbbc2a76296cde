import os

import pytest

from ftkit.pipex import PipexError, main, resolve_command, run_pipeline, search_path


def _make_script(directory, name, mode=0o755):
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(path, mode)
    return path


def test_search_path_from_mapping():
    assert search_path({"PATH": "/usr/bin:/bin"}) == ["/usr/bin", "/bin"]


def test_search_path_from_entries_drops_empty_pieces():
    env = ["HOME=/home/someone", "PATH=/a::/b:", "PATH=/ignored"]
    assert search_path(env) == ["/a", "/b"]


def test_search_path_without_path_is_empty():
    assert search_path({"HOME": "/home/someone"}) == []


def test_resolve_command_searches_directories_in_order(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    tools = tmp_path / "tools"
    tools.mkdir()
    script = _make_script(tools, "tool")
    path, words = resolve_command("tool  -x arg", [str(empty), str(tools)])
    assert path == str(script)
    assert words == ["tool", "-x", "arg"]


def test_resolve_command_skips_non_executable(tmp_path):
    first = tmp_path / "first"
    first.mkdir()
    second = tmp_path / "second"
    second.mkdir()
    _make_script(first, "tool", mode=0o644)
    script = _make_script(second, "tool")
    path, _ = resolve_command("tool", [str(first), str(second)])
    assert path == str(script)


def test_resolve_command_absolute_path(tmp_path):
    script = _make_script(tmp_path, "tool")
    path, words = resolve_command(str(script), [])
    assert path == str(script)
    assert words == [str(script)]


def test_resolve_command_not_found(tmp_path):
    with pytest.raises(PipexError, match="zsh: command not found: nope"):
        resolve_command("nope", [str(tmp_path)])


def test_resolve_command_empty_command():
    with pytest.raises(PipexError):
        resolve_command("   ", ["/bin"])


def test_run_pipeline_connects_commands(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("hello world\n")
    outfile = tmp_path / "out.txt"
    statuses = run_pipeline(str(infile), "cat", "tr a-z A-Z", str(outfile), os.environ)
    assert statuses == (0, 0)
    assert outfile.read_text() == "HELLO WORLD\n"


def test_run_pipeline_truncates_outfile(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("abc\n")
    outfile = tmp_path / "out.txt"
    outfile.write_text("old content that is much longer\n")
    run_pipeline(str(infile), "cat", "cat", str(outfile), os.environ)
    assert outfile.read_text() == "abc\n"


def test_run_pipeline_missing_infile_still_creates_outfile(tmp_path):
    infile = tmp_path / "missing.txt"
    outfile = tmp_path / "out.txt"
    with pytest.raises(PipexError, match="no such file or directory"):
        run_pipeline(str(infile), "cat", "cat", str(outfile), os.environ)
    assert outfile.exists()
    assert outfile.read_text() == ""


def test_run_pipeline_missing_second_command(tmp_path, capsys):
    infile = tmp_path / "in.txt"
    infile.write_text("data\n")
    outfile = tmp_path / "out.txt"
    statuses = run_pipeline(
        str(infile), "cat", "no-such-command-here", str(outfile), os.environ
    )
    assert statuses[1] == 1
    assert outfile.read_text() == ""
    assert "zsh: command not found: no-such-command-here" in capsys.readouterr().err


def test_run_pipeline_missing_first_command_gives_empty_input(tmp_path, capsys):
    infile = tmp_path / "in.txt"
    infile.write_text("data\n")
    outfile = tmp_path / "out.txt"
    statuses = run_pipeline(
        str(infile), "no-such-command-here", "cat", str(outfile), os.environ
    )
    assert statuses == (1, 0)
    assert outfile.read_text() == ""
    assert "command not found" in capsys.readouterr().err


def test_main_wrong_argument_count(capsys):
    assert main(["a", "b", "c"]) == 1
    assert "Arguments numbers not egal to 4" in capsys.readouterr().err


def test_main_runs_pipeline(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("one\ntwo\n")
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "cat", "cat", str(outfile)]) == 0
    assert outfile.read_text() == "one\ntwo\n"


def test_main_missing_infile(tmp_path, capsys):
    infile = tmp_path / "missing.txt"
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "cat", "cat", str(outfile)]) == 1
    assert f"zsh: no such file or directory: {infile}" in capsys.readouterr().err