"""
fv1font Package
A Python package for decoding and inspecting fv1 ("FNT1") bitmap fonts.
"""

__version__ = '0.1.0'
__author__ = 'RMR'
__description__ = 'fv1 bitmap font decoder with pixel grid rasterizer'
