"""Glass cockpit gauge components that draw onto a recording canvas."""

__version__ = "0.0.1"