"""Test doubles and seeded fixture data."""
