"""Shellkit: a tiny toolkit of Unix-style utilities behind a single dispatcher."""

__version__ = "0.1.0"
