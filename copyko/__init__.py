"""Copy kernel modules and their dependencies into a staging tree."""

__version__ = "0.1"
