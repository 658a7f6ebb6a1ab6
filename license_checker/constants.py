"""Constants for license-checker."""

# Exit codes
EXIT_SUCCESS = 0  # No violations found
EXIT_VIOLATIONS = 1  # At least one dependency failed the license check
EXIT_ERROR = 2  # Check failed due to error

# Workspace descriptor file name
DESCRIPTOR_NAME = "package.json"

# Directory holding installed dependencies inside a workspace
INSTALL_DIR_NAME = "node_modules"

# Directories never descended into during workspace discovery
EXCLUDED_DIRECTORIES = frozenset(
    {
        "node_modules",
        ".git",
        ".turbo",
        ".next",
        "dist",
        "coverage",
        "build",
    }
)

# Sentinel for a missing license or version
UNKNOWN = "UNKNOWN"

FAILURE_REASON = (
    "These licenses are incompatible with commercial/proprietary use."
)

REQUIRED_ACTIONS = (
    "Remove the packages with non-compliant licenses",
    "Find alternative packages with compatible licenses",
    "Or obtain legal approval before proceeding",
)
