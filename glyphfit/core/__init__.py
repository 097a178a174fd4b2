"""glyphfit.core — Foundation layer.

Contains the colour codec and palette, font loading and metrics, the text
fitting/layout engine, image helpers, settings, and the report builder.
This module has NO dependencies on glyphfit.commands or glyphfit.registry.
Only stdlib, numpy, PIL and fontTools are allowed here.
"""
