"""
CLI layer for tutor.

Handles only terminal transport: reading the single selector token,
writing the listing and error text, and mapping outcomes to exit codes.
Resolution and dispatch live in ``tutor.framework``.

Entry point::

    tutor list
"""

from tutor.cli.app import app, main

__all__ = ["app", "main"]
