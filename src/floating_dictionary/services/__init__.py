"""High level services that orchestrate the application workflow."""

from .channel import ResultChannel
from .orchestrator import TranslationOrchestrator
from .pipeline import PipelineDependencies, ProcessingPipeline

__all__ = ["PipelineDependencies", "ProcessingPipeline", "ResultChannel", "TranslationOrchestrator"]
