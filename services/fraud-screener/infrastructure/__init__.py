"""Infrastructure layer exports."""

from .assemblyai_provider import AssemblyAIProvider

__all__ = ["AssemblyAIProvider"]
