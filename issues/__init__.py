"""Fetch a GitHub project's issues and print the most recent ones as a table."""
