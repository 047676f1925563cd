"""TrophicNet layout and flow-geometry engine."""

from trophicnet.engine.assembler import NetworkAssembler, assemble_network
from trophicnet.engine.config import NetworkConfig
from trophicnet.engine.errors import DefectKind, InvalidNetworkError, NetworkDefect
from trophicnet.engine.levels import ColorPair, Level, NetworkScene
from trophicnet.engine.validator import ensure_valid, validate_levels

__all__ = [
    "NetworkAssembler",
    "assemble_network",
    "NetworkConfig",
    "DefectKind",
    "InvalidNetworkError",
    "NetworkDefect",
    "ColorPair",
    "Level",
    "NetworkScene",
    "ensure_valid",
    "validate_levels",
]
