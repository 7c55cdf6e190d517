#!/usr/bin/env python3
"""Main CLI entry point for the cricket database bootstrap."""

from cricket_database.cli.main import app

if __name__ == '__main__':
    app()
