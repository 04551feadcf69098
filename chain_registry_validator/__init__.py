"""Chain registry validator.

Validates a directory-structured registry of chain metadata records,
grouped by network tier, and reports every violation found.
"""

__version__ = "1.0.0"
