"""
Batch collector: runs the permutation engine over every line of an input stream
"""

from typing import Iterable, List

from core.permutations import generate_permutations, remove_duplicates
from utils.error_handler import InputReadError
from utils.logger import get_logger


def iter_seeds(lines: Iterable[str]) -> Iterable[str]:
    """Yield trimmed seed lines, skipping blanks and `#` comments"""
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        yield line


def process_input(lines: Iterable[str], unique: bool = True, verbose: bool = False) -> List[str]:
    """
    Generate permutations for each seed line and combine them in line order.

    With `unique`, the combined list is deduplicated across all seeds. A read
    failure discards everything collected so far and raises InputReadError.
    """
    logger = get_logger()
    all_results: List[str] = []

    try:
        for seed in iter_seeds(lines):
            if verbose:
                logger.info(f"Processing: {seed}")
            all_results.extend(generate_permutations(seed, unique=unique, verbose=verbose))
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"error reading input: {e}") from e

    if unique:
        all_results = remove_duplicates(all_results)

    return all_results
