"""Core components for OMI validation.

This module contains the foundational components shared by the command
line entry point, currently configuration handling.
"""
