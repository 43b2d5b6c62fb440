"""
manifest_merge package

Provides the CLI entrypoint (`python -m manifest_merge.cli`) and the helpers
for merging and pushing the repositories listed in a repo manifest.
"""

from .cli import main

__all__ = ["main"]
