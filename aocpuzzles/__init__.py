"""Advent of Code puzzle solvers for 2015 and 2016 and a timing runner."""

__version__ = "0.1.0"