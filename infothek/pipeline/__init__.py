"""
Command-line pipeline for the Infothek wiki generator.
"""
