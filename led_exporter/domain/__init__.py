"""Domain layer for the LED exporter.

Pure types and functions with no I/O: exceptions, sample models and
label sanitization.
"""
