"""Worked solutions to Rust exercises, a rust-analyzer project file generator and status helpers."""

__version__ = "0.1.0"