"""
Centralized constants for the godep rule generator

Organized into sections:
- Go Source Conventions
- Rule Templates
- Error Handling
- Default Configuration
"""

# Go Source Conventions
GO_SOURCE_SUFFIX = ".go"
ENTRY_PACKAGE = "main"
ENTRY_FUNCTION = "main"

# Rule Templates
OBJECT_SUFFIX = "${O}"
EXTERNAL_MARKER_PREFIX = ".EXTERNAL: "
EXTERNAL_COMMENT_PREFIX = "# external packages: "
FILE_LIST_PREFIX = "GOFILES = "
ARTIFACT_TEMPLATE = "{name}.{suffix}"
RULE_TEMPLATE = "{target}: {prerequisites}"

# Error Handling
ERROR_TEMPLATES = {
    "unreadable": "cannot read {path}: {reason}",
    "missing_package": "{path}: expected 'package' clause",
    "unterminated_comment": "{path}:{line}: comment not terminated",
    "unterminated_string": "{path}:{line}: string literal not terminated",
    "unterminated_imports": "{path}:{line}: import block not terminated",
    "bad_import": "{path}:{line}: expected import path",
}

# Default Configuration
DEFAULT_EXCLUSIONS = [
    "*_test.go",
    ".*",
    "_*",
    "testdata",
]

STATS_HEADERS = ["Package", "Files", "Imports", "External", "Roots"]
