"""
provctl: provisionamiento de ambientes mediante providers intercambiables y hooks.
"""

__version__ = "0.1.0"
