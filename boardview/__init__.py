"""Core logic of a PCB layout viewer: search, suggestions, key bindings, board settings, PDF bridging and renderer selection."""

__version__ = "0.1.0"