"""
GhanaNLP API integration.
"""

from .client import GhanaNLPClient, SynthesizedAudio

__all__ = [
    "GhanaNLPClient",
    "SynthesizedAudio",
]
