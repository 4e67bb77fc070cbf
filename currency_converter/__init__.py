"""
Interactive currency converter over a static table of reference-relative rates.
"""

__version__ = "0.1.0"
