"""Source locations, diagnostic codes, compiler options and coloured error reports for the Swallow compiler."""

__version__ = "0.0.1"