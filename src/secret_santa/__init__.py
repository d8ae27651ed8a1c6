"""
secret_santa: yearly gift-giver draw with family and history exclusions.
"""

__version__ = "0.1.0"
