"""Descriptor frontend: JSON/TOML item descriptions to constructs."""

from .core import DescriptorError, from_descriptor, load_descriptor

__all__ = ["DescriptorError", "from_descriptor", "load_descriptor"]
