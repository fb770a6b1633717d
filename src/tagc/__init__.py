"""tagc: C code generation backend for tagged-value programs."""

__version__ = "0.1.0"
