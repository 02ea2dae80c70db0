"""Solvers for the 2024 puzzles."""