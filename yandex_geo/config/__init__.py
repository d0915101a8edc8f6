"""
Configuration and logging helpers for the geocoder client.
"""
