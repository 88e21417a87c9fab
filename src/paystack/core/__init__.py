# src/paystack/core/__init__.py

"""
Configuration, logging, exceptions and helpers shared by the client.
"""
