"""Terminal status helpers, a rust-analyzer project file builder, and solved exercise logic."""

__version__ = "5.5.1"