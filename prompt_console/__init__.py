"""Prompt Console.

Management console for a prompt template catalog with a side-by-side
model playground.
"""

__version__ = "0.1.0"
