"""heyps: run Adobe automation scripts in the right installed application version.

Submodules are imported directly; keep __all__ empty.
"""

__version__ = "1.0.0"

__all__: list[str] = []
