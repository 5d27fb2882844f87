"""Simulation layer: step engine, owned simulation context, and the driver loop."""

from soliton.simulation.context import Simulation
from soliton.simulation.engine import (
    StepParams,
    apply_source_sink,
    diffuse,
    react,
    reaction_volume,
    step,
)
from soliton.simulation.runner import run_simulation

__all__ = [
    "Simulation",
    "StepParams",
    "apply_source_sink",
    "diffuse",
    "react",
    "reaction_volume",
    "run_simulation",
    "step",
]
