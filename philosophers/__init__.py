"""Threaded simulation of the dining philosophers problem: argument parsing, status messages and the simulation."""

__version__ = "0.1.0"
__all__ = ["messages", "parser", "simulation"]