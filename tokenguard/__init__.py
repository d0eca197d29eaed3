"""
TokenGuard
----------
Bearer token issuing and validation with a closed, structured error taxonomy.
"""

__version__ = "1.0.0"
