"""
Lighting Quote Package

Pricing and kit planning for permanent holiday lighting installs.
Resolves a footage request into tier pricing, a least-cost kit cover,
deposit and profit figures.
"""

__version__ = "1.0.0"
