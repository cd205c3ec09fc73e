"""Functions for classic competitive-programming problems.

The package has modules for number theory, dynamic programming, arrays and
graphs.
"""

__version__ = "0.1.0"