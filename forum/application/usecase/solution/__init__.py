"""Solution use cases."""

from .mark_solution import MarkSolutionRequest, MarkSolutionUseCase, SolutionResponse
from .remove_solution import RemoveSolutionRequest, RemoveSolutionUseCase

__all__ = [
    "MarkSolutionRequest",
    "MarkSolutionUseCase",
    "RemoveSolutionRequest",
    "RemoveSolutionUseCase",
    "SolutionResponse",
]
