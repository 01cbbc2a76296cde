"""String, memory, list and formatting helpers, a line reader, a philosophers simulation and a pipeline runner."""

__version__ = "0.1.0"