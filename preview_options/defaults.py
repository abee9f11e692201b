"""
Shared default values for preview_options.

Keep this module free of imports so config and options can both use it.
"""

DEFAULT_BOUNDARY = 1000
DEFAULT_DIVISIONS = 10
DEFAULT_OVERLAP_POLICY = "reject"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FILE = ""
