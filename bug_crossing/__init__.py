"""
Bug Crossing - cross the stone lanes without getting hit by a bug.
"""

__version__ = "0.1.0"
