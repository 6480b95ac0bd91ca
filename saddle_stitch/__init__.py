"""
Saddle-stitch image booklet maker.

This package computes the booklet imposition order for a sequence of images,
lays the imposed pages out two per sheet, and renders the result to PDF.
"""

__version__ = "1.0.0"
