"""Building blocks for a small shell: input checks, expansion, environment, history, builtins and execution."""

__version__ = "0.1.0"