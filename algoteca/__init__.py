"""Classic algorithms: combinatorics, number theory, backtracking, sorting, strings, geometry, graphs, games and dynamic programming."""

__version__ = "0.1.0"