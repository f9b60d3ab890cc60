"""
gover - download, verify, build and run Go release versions.
"""

__version__ = "0.1.0"
