"""Load, inspect, compile and run small Rust exercises."""

__version__ = "0.1.0"