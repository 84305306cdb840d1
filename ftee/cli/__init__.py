"""ftee CLI — Typer-based command-line interface.

Provides the ``ftee`` command. Errors and the optional run summary are
printed with Rich.
"""
