"""
Loom-draft export: WIF writer and reader.
"""

from tartanism.export.types import LoomDraft, WifDraft, WifMetadata
from tartanism.export.wif import generate_wif, read_wif

__all__ = ["WifMetadata", "WifDraft", "LoomDraft", "generate_wif", "read_wif"]
