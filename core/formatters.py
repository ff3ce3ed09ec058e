"""
Result serializers: plain, json and csv
"""

import csv
import json
from enum import Enum
from typing import Callable, Dict, List, TextIO, Union

from utils.error_handler import OutputWriteError


class OutputFormat(str, Enum):
    PLAIN = "plain"
    JSON = "json"
    CSV = "csv"


def write_plain(writer: TextIO, results: List[str]):
    """One subdomain per line"""
    for result in results:
        writer.write(result + "\n")


def write_json(writer: TextIO, results: List[str]):
    """A single compact JSON array followed by a newline"""
    json.dump(list(results), writer, separators=(",", ":"))
    writer.write("\n")


def write_csv(writer: TextIO, results: List[str]):
    """`subdomain` header, then one row per result"""
    csv_writer = csv.writer(writer, lineterminator="\n")
    csv_writer.writerow(["subdomain"])
    csv_writer.writerows([result] for result in results)


WRITERS: Dict[OutputFormat, Callable[[TextIO, List[str]], None]] = {
    OutputFormat.PLAIN: write_plain,
    OutputFormat.JSON: write_json,
    OutputFormat.CSV: write_csv,
}


def write_output(writer: TextIO, results: List[str], fmt: Union[OutputFormat, str] = OutputFormat.PLAIN):
    """Serialize results to writer in the requested format"""
    try:
        output_format = OutputFormat(fmt)
    except ValueError:
        choices = ", ".join(f.value for f in OutputFormat)
        raise ValueError(f"unknown output format '{fmt}' (expected one of: {choices})")

    try:
        WRITERS[output_format](writer, results)
    except OSError as e:
        raise OutputWriteError(f"error writing output: {e}") from e
