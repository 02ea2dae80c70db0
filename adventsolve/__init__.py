"""Advent of Code puzzle solvers and a command-line runner."""

__version__ = "0.1.0"