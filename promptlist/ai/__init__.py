"""
Generative-text service integration.
"""

from .client import GeminiClient, DEFAULT_MODEL
from .exceptions import AIError, AIServiceError

__all__ = [
    'GeminiClient',
    'DEFAULT_MODEL',
    'AIError',
    'AIServiceError',
]
