"""Core package for subcomb"""

from .validator import is_valid_subdomain, normalize_subdomain
from .permutations import generate_permutations, permutation_count, remove_duplicates
from .collector import process_input
from .formatters import OutputFormat, write_output
from .workflow import run_generation

__all__ = [
    "is_valid_subdomain",
    "normalize_subdomain",
    "generate_permutations",
    "permutation_count",
    "remove_duplicates",
    "process_input",
    "OutputFormat",
    "write_output",
    "run_generation",
]
