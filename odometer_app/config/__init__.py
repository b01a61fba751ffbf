"""
Configuration module.

Default parameters, YAML overrides and validation for the counter and its
logging setup.
"""
