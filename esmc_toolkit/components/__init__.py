"""Component stubs: hashing, paths, data processing and fixed-shape replies."""

from esmc_toolkit.components.colonel import Colonel
from esmc_toolkit.components.data_processor import DataProcessor
from esmc_toolkit.components.intelligence import (
    IntelligenceProcessor,
    StrategicIntelligence,
)
from esmc_toolkit.components.stubs import echo, make_stub

__all__ = [
    "Colonel",
    "DataProcessor",
    "IntelligenceProcessor",
    "StrategicIntelligence",
    "echo",
    "make_stub",
]
