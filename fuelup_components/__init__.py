"""
fuelup-components — registry of the components distributed by fuelup.
"""

__version__ = "0.1.0"
