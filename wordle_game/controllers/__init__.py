"""
Controllers Package

HTTP endpoints exposing game sessions.
"""
