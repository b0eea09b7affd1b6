"""
ffm - a keyboard-driven terminal directory browser

Lists a directory with sizes and modification times, sorts by name or size,
and navigates into subdirectories or back to parents.

Created: 2026-10-19
"""

__version__ = "0.1.0"
