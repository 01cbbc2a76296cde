"""Run two commands connected by a pipe, reading one file and writing another."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import BinaryIO, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ftkit.strings import split

Environment = Union[Mapping[str, str], Iterable[str]]

_MISSING_COMMAND_STATUS = 1


class PipexError(Exception):
    """Raised when the pipeline cannot be set up or a command cannot be found."""


def _environment(env: Optional[Environment]) -> dict:
    """Return the environment as a dict, from a mapping or ``KEY=VALUE`` strings."""
    if env is None:
        return dict(os.environ)
    if isinstance(env, Mapping):
        return dict(env)
    result = {}
    for entry in env:
        key, _, value = entry.partition("=")
        result.setdefault(key, value)
    return result


def search_path(env: Environment) -> List[str]:
    """Return the non-empty directories listed in the PATH of ``env``.

    ``env`` is a mapping or a sequence of ``KEY=VALUE`` strings, in which the
    first entry starting with ``PATH=`` is used. Without PATH the list is empty.
    """
    if isinstance(env, Mapping):
        value = env.get("PATH")
    else:
        value = next(
            (entry[len("PATH="):] for entry in env if entry.startswith("PATH=")),
            None,
        )
    if value is None:
        return []
    return split(value, ":")


def _is_executable(path: str) -> bool:
    return os.access(path, os.F_OK | os.X_OK)


def resolve_command(command: str, directories: Sequence[str]) -> Tuple[str, List[str]]:
    """Return the program path and argument list for a command line.

    The command line is split on spaces. A command starting with '/' is taken
    as the program path as written; otherwise the first word is looked up in
    ``directories`` in order.
    """
    words = split(command, " ")
    not_found = PipexError(f"zsh: command not found: {command}")
    if not words:
        raise not_found
    if command.startswith("/"):
        if _is_executable(command):
            return command, words
        raise not_found
    for directory in directories:
        candidate = directory + "/" + words[0]
        if _is_executable(candidate):
            return candidate, words
    raise not_found


def _spawn(
    command: str,
    directories: Sequence[str],
    env: dict,
    stdin,
    stdout,
) -> Optional[subprocess.Popen]:
    """Start one stage of the pipeline; report and return None when it cannot run."""
    try:
        path, words = resolve_command(command, directories)
        return subprocess.Popen(
            words, executable=path, env=env, stdin=stdin, stdout=stdout
        )
    except (PipexError, OSError):
        sys.stderr.write(f"zsh: command not found: {command}\n")
        sys.stderr.flush()
        return None


def _open_files(infile: str, outfile: str) -> Tuple[BinaryIO, BinaryIO]:
    source: Optional[BinaryIO] = None
    sink: Optional[BinaryIO] = None
    try:
        source = open(infile, "rb")
    except OSError:
        source = None
    try:
        descriptor = os.open(outfile, os.O_RDWR | os.O_TRUNC | os.O_CREAT, 0o644)
        sink = os.fdopen(descriptor, "wb")
    except OSError:
        sink = None
    if source is None or sink is None:
        for handle in (source, sink):
            if handle is not None:
                handle.close()
        raise PipexError(f"zsh: no such file or directory: {infile}")
    return source, sink


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Optional[Environment] = None,
) -> Tuple[int, int]:
    """Run ``first < infile | second > outfile`` and return both exit statuses.

    The output file is created or truncated even when the input file cannot be
    opened; either failure raises PipexError. A command that cannot be found is
    reported on stderr and counts as exiting with status 1.
    """
    environment = _environment(env)
    directories = search_path(environment)
    source, sink = _open_files(infile, outfile)
    with source, sink:
        first_proc = _spawn(
            first, directories, environment, stdin=source, stdout=subprocess.PIPE
        )
        second_input = first_proc.stdout if first_proc is not None else subprocess.DEVNULL
        second_proc = _spawn(
            second, directories, environment, stdin=second_input, stdout=sink
        )
        if first_proc is not None and first_proc.stdout is not None:
            first_proc.stdout.close()
        second_status = (
            second_proc.wait() if second_proc is not None else _MISSING_COMMAND_STATUS
        )
        first_status = (
            first_proc.wait() if first_proc is not None else _MISSING_COMMAND_STATUS
        )
    return first_status, second_status


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run ``infile cmd1 cmd2 outfile`` from the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write("Arguments numbers not egal to 4\n")
        return 1
    infile, first, second, outfile = args
    try:
        run_pipeline(infile, first, second, outfile)
    except PipexError as error:
        sys.stderr.write(f"{error}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())