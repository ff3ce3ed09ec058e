"""
Label-order permutation engine

Splits a domain into a fixed base (the last two labels) and the movable labels
in front of it, then emits every ordered, repetition-free selection of the
movable labels in front of the base.

The output grows factorially: n movable labels give
1 + sum(n!/(n-k)! for k in 1..n) results (n=3 -> 16, n=6 -> 1957,
n=9 -> 986410).
"""

import math
from typing import Iterable, Iterator, List, Tuple

from core.validator import is_valid_subdomain, normalize_subdomain
from utils.error_handler import ErrorHandler, InvalidSubdomainError
from utils.logger import get_logger


# Movable-label count above which a run is worth warning about
LARGE_LABEL_WARNING = 8


def permutation_count(n: int) -> int:
    """Number of results (before dedup) for n movable labels, base included"""
    if n < 0:
        raise ValueError("label count must be >= 0")
    return 1 + sum(math.perm(n, k) for k in range(1, n + 1))


def split_domain(labels: List[str]) -> Tuple[str, List[str]]:
    """Return (base domain, movable labels) for a label list of length >= 2"""
    if len(labels) < 2:
        raise ValueError("need at least two labels to form a base domain")
    return ".".join(labels[-2:]), labels[:-2]


def iter_label_permutations(labels: List[str], size: int) -> Iterator[List[str]]:
    """
    Yield every arrangement of `size` labels drawn without replacement.

    Depth-first, filling positions left to right and trying labels in their
    original order. Used-ness is tracked by label position, so repeated label
    text still counts as distinct labels.
    """
    if size <= 0 or size > len(labels):
        return

    used = [False] * len(labels)
    current: List[str] = []

    def backtrack() -> Iterator[List[str]]:
        if len(current) == size:
            yield list(current)
            return
        for i, label in enumerate(labels):
            if used[i]:
                continue
            used[i] = True
            current.append(label)
            yield from backtrack()
            current.pop()
            used[i] = False

    yield from backtrack()


def remove_duplicates(items: Iterable[str]) -> List[str]:
    """Drop repeated entries, keeping the first occurrence of each"""
    return list(dict.fromkeys(items))


def _prepare(subdomain: str) -> str:
    normalized = normalize_subdomain(subdomain)
    if not is_valid_subdomain(normalized):
        raise InvalidSubdomainError(normalized)
    return normalized


def generate_permutations(subdomain: str, unique: bool = True, verbose: bool = False) -> List[str]:
    """
    All label-order permutations of one seed domain.

    The base domain comes first, then every selection of 1..n movable labels
    in ascending size. Invalid seeds give an empty list (with a warning on
    stderr when verbose).
    """
    try:
        normalized = _prepare(subdomain)
    except InvalidSubdomainError as e:
        if verbose:
            ErrorHandler().handle_error(e, {"seed": subdomain})
        return []

    parts = normalized.split(".")
    if len(parts) < 2:
        return [normalized]

    base_domain, movable = split_domain(parts)

    if len(movable) > LARGE_LABEL_WARNING:
        get_logger().warning(
            f"{normalized} has {len(movable)} movable labels; "
            f"this will generate {permutation_count(len(movable)):,} results"
        )

    combinations = [base_domain]
    for length in range(1, len(movable) + 1):
        for arrangement in iter_label_permutations(movable, length):
            combinations.append(".".join(arrangement) + "." + base_domain)

    if unique:
        combinations = remove_duplicates(combinations)

    return combinations
