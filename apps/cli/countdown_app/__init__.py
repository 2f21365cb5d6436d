"""Command-line app for countdown GIF rendering."""
