"""
readme_bumper package

HTTP service that appends a trailing space to README.md in repositories of
one GitHub organization, creating the file when it is missing.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
