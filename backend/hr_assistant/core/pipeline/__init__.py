"""Chat pipeline components.

- PipelineState: immutable per-request state passed between stages
- ResponseEnvelope: final reply shape
- PipelineOrchestrator: runs the stages in order
"""

from .models import PipelineState, ResponseEnvelope
from .orchestrator import PipelineOrchestrator

__all__ = [
    "PipelineState",
    "ResponseEnvelope",
    "PipelineOrchestrator",
]
