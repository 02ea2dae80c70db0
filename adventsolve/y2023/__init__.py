"""Solvers for the 2023 puzzles."""