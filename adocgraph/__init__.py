"""AsciiDoc semantic graph node types, diagnostics, and attribute entry and header line parsing."""

__version__ = "0.1.0"
__all__ = ["asg", "diagnostic", "attrvalues", "entries"]