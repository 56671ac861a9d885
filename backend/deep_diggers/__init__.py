"""Deep Diggers: a small multiplayer mining game served over HTTP."""

__version__ = "0.1.0"
