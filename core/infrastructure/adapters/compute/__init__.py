"""Compute driver adapters.

The Google driver pulls in aiohttp; import it from its module when needed.
"""

from .mock_compute_driver import MockComputeDriver

__all__ = ["MockComputeDriver"]
