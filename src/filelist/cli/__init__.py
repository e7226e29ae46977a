"""Command-line interface for filelist."""
