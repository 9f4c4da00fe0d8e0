"""Text polishing backends."""

from profile_api.providers.base import TextPolisher
from profile_api.providers.huggingface import HuggingFaceTextPolisher

__all__ = [
    "HuggingFaceTextPolisher",
    "TextPolisher",
]
