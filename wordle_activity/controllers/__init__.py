"""
Controllers Package

Flask blueprints for the HTTP API.
"""
