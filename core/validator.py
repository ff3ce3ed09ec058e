"""
Domain-shape validation for seed subdomains
"""

import re


LABEL_PATTERN = r'[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?'
TLD_PATTERN = r'[a-zA-Z]{2,63}'

# Zero or more labels, then a TLD-shaped final label
SUBDOMAIN_RE = re.compile(rf'(?:{LABEL_PATTERN}\.)*{TLD_PATTERN}')


def normalize_subdomain(value: str) -> str:
    """Lower-case, trim and drop a single trailing dot"""
    value = value.lower().strip()
    if value.endswith("."):
        value = value[:-1]
    return value


def is_valid_subdomain(value: str) -> bool:
    """
    Check whether a string looks like a domain name.

    The string is checked as given: callers normalize first. Every label is
    1-63 characters of letters, digits and internal hyphens, and the last
    label is alphabetic with at least two characters.
    """
    if not isinstance(value, str):
        return False
    # fullmatch, since `$` would accept a trailing newline
    return SUBDOMAIN_RE.fullmatch(value) is not None
