"""Solvers for the 2015 puzzles, days 1 to 25."""