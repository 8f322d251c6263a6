"""
Configuration loading and validation.

Provides strongly typed settings objects for feature selection and the logger
bootstrap, loaded from environment variables and .env files.
"""
