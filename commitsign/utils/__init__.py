"""Utility modules for commitsign."""
