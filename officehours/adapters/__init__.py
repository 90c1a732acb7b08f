"""
Adapters layer - Interview storage.
"""

from .mock_interview_repository import MockInterviewRepository

__all__ = ["MockInterviewRepository"]
