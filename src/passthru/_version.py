"""
Provides passthru version information.
"""

from incremental import Version


__version__ = Version("passthru", 21, 1, 0)
__all__ = ["__version__"]
