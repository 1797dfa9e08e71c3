"""PODSMITH - Authoring and validation helper for CocoaPods specs.

This package provides a Python CLI application for creating podspec
stubs, linting podspecs and printing the best known spec of a pod.
"""

__version__ = "0.1.0"
SCRIPT_NAME = "PODSMITH"
SPEC_EXTENSION = ".podspec"

__all__ = [
    "__version__",
    "SCRIPT_NAME",
    "SPEC_EXTENSION",
]
