"""
Seed-list fixtures for subcomb tests.
Provides sample input files and the permutation sets they should produce.
"""
import pytest
from pathlib import Path
from typing import Dict, List


# =============================================================================
# Expected permutations per seed, in generation order
# =============================================================================

EXPECTED_PERMUTATIONS: Dict[str, List[str]] = {
    "sub.api.example.com": [
        "example.com",
        "sub.example.com",
        "api.example.com",
        "sub.api.example.com",
        "api.sub.example.com",
    ],
    "a.b.example.com": [
        "example.com",
        "a.example.com",
        "b.example.com",
        "a.b.example.com",
        "b.a.example.com",
    ],
    "c.example.com": [
        "example.com",
        "c.example.com",
    ],
    "example.com": [
        "example.com",
    ],
}

SEED_FILE_CONTENT = """a.b.example.com

# comment
c.example.com
"""


@pytest.fixture
def expected_permutations():
    """Factory returning the expected results for a known seed."""
    def _get(seed: str) -> List[str]:
        return list(EXPECTED_PERMUTATIONS[seed])
    return _get


@pytest.fixture
def seed_file(tmp_path) -> Path:
    """Input file with two seeds, a blank line and a comment."""
    path = tmp_path / "subdomains.txt"
    path.write_text(SEED_FILE_CONTENT, encoding="utf-8")
    return path
