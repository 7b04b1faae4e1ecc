"""Solvers for the 2016 puzzles, days 1 to 8."""