"""Terminal UI components for comparing entity fields and managing their mappings."""

__version__ = "0.1.0"