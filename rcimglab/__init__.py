"""RC/RL step-response simulation with SVG plots, and binary PGM image filters."""

__version__ = "0.1.0"