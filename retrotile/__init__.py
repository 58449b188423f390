"""
Retro Tile Studio - asset decoding and compositing core.

Decodes raw palette and tile binaries into typed entities and renders
tile maps, tile sheets and palette strips into pixel buffers.
"""

__version__ = "0.1.0"
