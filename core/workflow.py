"""
Generation workflow: resolve input and output, collect, serialize
"""

import io
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, TextIO, Union

from core.collector import process_input
from core.formatters import OutputFormat, write_output
from utils.error_handler import InputReadError, NoInputError, OutputWriteError
from utils.logger import get_logger


def stdin_is_piped(stream: TextIO) -> bool:
    """True when stream is not an interactive terminal"""
    try:
        return not stream.isatty()
    except (AttributeError, ValueError):
        return False


@contextmanager
def open_input_source(
    input_file: Optional[Union[str, Path]] = None,
    seed: Optional[str] = None,
    stdin: Optional[TextIO] = None,
) -> Iterator[TextIO]:
    """
    Yield a line stream: the input file, else the seed argument, else piped stdin.

    Raises InputReadError when the file cannot be opened and NoInputError
    when there is nothing to read.
    """
    if input_file:
        try:
            handle = open(input_file, "r", encoding="utf-8")
        except OSError as e:
            raise InputReadError(f"error opening input file: {e}", source=str(input_file)) from e
        with handle:
            yield handle
        return

    if seed is not None:
        yield io.StringIO(seed)
        return

    stdin = stdin if stdin is not None else sys.stdin
    if stdin is None or not stdin_is_piped(stdin):
        raise NoInputError()
    yield stdin


@contextmanager
def open_output_sink(output_file: Optional[Union[str, Path]] = None,
                     stdout: Optional[TextIO] = None) -> Iterator[TextIO]:
    """Yield the output file (created or truncated) or stdout"""
    if not output_file:
        yield stdout if stdout is not None else sys.stdout
        return

    try:
        handle = open(output_file, "w", encoding="utf-8", newline="\n")
    except OSError as e:
        raise OutputWriteError(f"error creating output file: {e}", destination=str(output_file)) from e
    with handle:
        yield handle


def run_generation(
    input_file: Optional[Union[str, Path]] = None,
    seed: Optional[str] = None,
    output_file: Optional[Union[str, Path]] = None,
    unique: bool = True,
    verbose: bool = False,
    fmt: Union[OutputFormat, str] = OutputFormat.PLAIN,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> List[str]:
    """
    Run one generation pass and return the results that were written.

    All input is consumed before the output is opened, so a failed read
    leaves no output behind.
    """
    output_format = OutputFormat(fmt)

    with open_input_source(input_file, seed, stdin) as lines:
        results = process_input(lines, unique=unique, verbose=verbose)

    if verbose:
        get_logger().info(f"Generated {len(results)} results")

    with open_output_sink(output_file, stdout) as writer:
        write_output(writer, results, output_format)
        try:
            writer.flush()
        except OSError as e:
            raise OutputWriteError(f"error writing output: {e}") from e

    return results
