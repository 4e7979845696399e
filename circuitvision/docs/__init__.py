"""
Docs module - generated documentation checks
"""

from .completion import extract_github_url, is_documentation_complete, should_show_github_button

__all__ = ["is_documentation_complete", "extract_github_url", "should_show_github_button"]
