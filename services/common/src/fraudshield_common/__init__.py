from fraudshield_common.config import AssemblyAIConfig, PollingConfig
from fraudshield_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "AssemblyAIConfig",
    "PollingConfig",
]
