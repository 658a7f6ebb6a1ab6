"""License analysis logic for license-checker."""
from license_checker.analysis.policy import evaluate_licenses, is_license_allowed
from license_checker.analysis.problematic import (
    PROHIBITED_PATTERNS,
    is_prohibited_license,
)

__all__ = [
    "PROHIBITED_PATTERNS",
    "evaluate_licenses",
    "is_license_allowed",
    "is_prohibited_license",
]
