"""Size per-CPU arrays from the kernel's possible-CPU information."""

__version__ = "0.1.0"
__all__ = ["__version__"]