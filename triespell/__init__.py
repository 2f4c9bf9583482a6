"""
triespell: trie dictionary with composable spell checkers.

The checking core lives in triespell.services (alphabet, trie, checkers);
triespell.main wraps it in a small HTTP API.
"""

__version__ = "0.1.0"
