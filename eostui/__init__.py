"""Table layout, formatting and record helpers for an EOS cluster console."""

__version__ = "0.1.0"