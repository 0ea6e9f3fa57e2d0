"""Discover Rundeck projects and jobs and normalize them into named resources."""

__version__ = "0.1.0"
