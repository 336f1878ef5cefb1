"""
Tile Wave - Tools

Command-line scripts built on the tilewave library.
"""
