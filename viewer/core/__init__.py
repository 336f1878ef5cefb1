"""
Tile Wave - Viewer Core Module

Constants and pygame surface helpers.
"""
