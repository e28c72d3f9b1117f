"""Command-line interface for wkbdecode."""
