"""Prohibited license detection for license-checker.

Identifies copyleft and source-available licenses that are rejected
regardless of the configured allowlist.
"""
import re
from typing import Optional

# Fixed denylist. LGPL and AGPL are also caught by GPL but stay listed
# so the set reads as the policy it enforces.
PROHIBITED_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"GPL", re.IGNORECASE),
    re.compile(r"LGPL", re.IGNORECASE),
    re.compile(r"AGPL", re.IGNORECASE),
    re.compile(r"SSPL", re.IGNORECASE),
    re.compile(r"BUSL", re.IGNORECASE),
    re.compile(r"Copyleft", re.IGNORECASE),
)


def is_prohibited_license(license_id: Optional[str]) -> bool:
    """Check if a license matches any prohibited pattern.

    Args:
        license_id: Declared license string or None.

    Returns:
        True if the license matches a prohibited pattern (case-insensitive).
    """
    if not license_id:
        return False

    return any(pattern.search(license_id) for pattern in PROHIBITED_PATTERNS)
