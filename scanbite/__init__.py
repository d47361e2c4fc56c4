"""
AAHAR / ScanBite
================

Food scanning service: analyse a photo of a food item or a packaged
product's barcode with a hosted Gemini model, backed by Open Food Facts
and a small mock product table.
"""

__version__ = "0.3.0"
