"""Visualization layer: field rendering and frame sinks."""

from soliton.viz.render import channel_sums, field_to_rgb
from soliton.viz.sink import FrameSink, PngFrameSink

__all__ = [
    "FrameSink",
    "PngFrameSink",
    "channel_sums",
    "field_to_rgb",
]
