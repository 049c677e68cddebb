import logging
import os
from typing import Optional

from google import genai
from google.genai import types

logger = logging.getLogger(__name__)


###############################################################################
# Base Text Generator Interface
###############################################################################
class BaseTextGenerator:
    """
    Abstract interface for remote text generation.
    Implementations return the raw generated text and let failures propagate.
    """
    def generate(self, prompt: str, max_output_tokens: int, temperature: float) -> str:
        raise NotImplementedError("generate must be implemented by subclasses")


###############################################################################
# Gemini Text Generator Implementation
###############################################################################
class GeminiTextGenerator(BaseTextGenerator):
    """
    Text generator backed by the google.genai client. Ensure that the
    GEMINI_API_KEY environment variable is set, or pass the key explicitly.

    Example usage:
        export GEMINI_API_KEY="your_actual_api_key"
    """
    def __init__(self, api_key: Optional[str] = None, model: str = 'gemini-1.5-flash', client=None):
        self.model = model

        if client is None:
            api_key = api_key or os.getenv('GEMINI_API_KEY')
            if not api_key:
                raise ValueError("GEMINI_API_KEY environment variable is not set.")
            client = genai.Client(api_key=api_key)

        self.client = client
        logger.info(f"Gemini text generator initialized with model {self.model}")

    def generate(self, prompt: str, max_output_tokens: int, temperature: float) -> str:
        response = self.client.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                max_output_tokens=max_output_tokens,
                temperature=temperature
            )
        )
        return response.text or ''
