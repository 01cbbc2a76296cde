# ftkit

A small toolkit written in plain Python. It has no third-party dependencies.

- **Characters and numbers** (`ftkit.chars`): `is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`, `atoi` and `itoa`.
  The classifiers accept a one-character string or an integer code.
- **Byte buffers** (`ftkit.memory`): `memset`, `bzero`, `calloc`, `memcpy`,
  `memmove`, `memchr` and `memcmp`. These work on `bytearray` and bytes-like
  objects.
  - `memmove(buffer, dest, src, length)` moves bytes between offsets inside a
    single buffer.
  - `memchr` returns an index or `None`.
- **Strings** (`ftkit.strings`): `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi` and
  `striteri`.
  - The search functions return an index or `None`.
  - `strlcpy(src, size)` and `strlcat(dst, src, size)` return a pair: the
    resulting text and the length the untruncated result would have had.
- **Singly linked list** (`ftkit.linked_list`): `Node` and `LinkedList`.
  - `LinkedList` provides `push_front`, `push_back`, `last`, `clear`, `iterate`
    and `map`.
  - It also supports `len()` and iteration.
- **Output** (`ftkit.output`): `put_char`, `put_str`, `put_endl` and `put_nbr`.
  Each writes to a given stream, or to stdout when no stream is given.
- **A minimal printf** (`ftkit.printf`): `format_string` and `printf`.
  - Supported conversions: `%c`, `%s`, `%p`, `%d`, `%i`, `%u`, `%x`, `%X` and
    `%%`.
  - `%s` with `None` prints `(null)`.
  - An unknown conversion produces nothing.
  - `printf` returns the number of characters written.
- **Buffered line reader** (`ftkit.line_reader`): `LineReader`.
- **Dining-philosophers simulation** (`ftkit.philosophers`): `Rules`,
  `Simulation`, `format_event` and `main`. The arguments are checked by
  `ftkit.philo_args`, which provides `check_arguments`, `parse_int` and
  `ArgumentError`.
- **Two-command pipeline runner** (`ftkit.pipex`): `search_path`,
  `resolve_command`, `run_pipeline`, `PipexError` and `main`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from ftkit.chars import atoi, itoa
from ftkit.strings import split, strtrim
from ftkit.printf import format_string
from ftkit.linked_list import LinkedList

atoi("  -12abc")              # -12
itoa(-42)                     # "-42"
split("  hello  world ", " ") # ["hello", "world"]
strtrim("xxhixx", "x")        # "hi"
format_string("%d is %x in hex", 255, 255)  # "255 is ff in hex"

items = LinkedList([1, 2, 3])
items.push_front(0)
items.push_back(4)
len(items)                    # 5
list(items)                   # [0, 1, 2, 3, 4]
```

### LineReader

`LineReader(source, buffer_size=10)` reads its source in chunks of
`buffer_size`. The source is either a file descriptor or any object with a
`read(size)` method.

- `read_line()` returns the next line with its trailing newline, or `None`
  when nothing is left.
- Lines come back as `bytes` or `str`, depending on what the source produces.
- Iterating over the reader yields every line that remains.

```python
from ftkit.line_reader import LineReader

with open("notes.txt") as handle:
    for line in LineReader(handle, 10):
        ...
```

## Commands

### ftkit-philo

```
ftkit-philo number_of_philosophers time_to_die time_to_eat time_to_sleep [meals]
```

Times are in milliseconds. Every argument must be a positive whole number no
larger than 2147483647. If an argument is missing, malformed, negative or
zero, the command prints `Error` and a message to stderr.

The simulation prints one coloured line per event:

- "has taken a fork"
- "is eating"
- "is sleeping"
- "is thinking"
- "died"

Each line gives the milliseconds elapsed since the start and the
philosopher's number.

A run stops in one of two ways:

- A philosopher starves. Its "died" line is the last event printed.
- A meal count was given and every philosopher except the first has eaten
  that many times. The command then prints `Thx for this good meal :)`.

With a single philosopher, the command prints the fork and death lines at once
and does not start any threads.

The command exits with status 1 in every case, including after a completed
simulation.

```
ftkit-philo 5 800 200 200 7
```

### ftkit-pipex

```
ftkit-pipex infile "grep foo" "wc -l" outfile
```

This behaves like `< infile grep foo | wc -l > outfile`.

- A command that starts with `/` is run from that path. Any other command is
  looked up in the directories on `PATH`.
- The output file is created or truncated, with mode 0644, even when the input
  file cannot be opened.
- If the wrong number of arguments is given, or either file cannot be opened,
  the command prints an error and exits with status 1.
- If a command cannot be found, it prints `zsh: command not found: <command>`
  and the other stage still runs. The exit status is then still 0.

From Python, `run_pipeline(infile, first, second, outfile, env=None)` returns
the exit statuses of both commands. A command that could not be found counts
as status 1.

## Limitations

`ftkit-pipex` connects exactly two commands. It does not take longer chains
and has no here-document mode. Command lines are split on spaces only, so
quoting is not interpreted.