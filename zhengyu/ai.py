import os
from typing import Optional, Type, TypeVar
from openai import OpenAI
from google import genai
from dotenv import load_dotenv
from pydantic import BaseModel

from zhengyu.prompts import PRESERVED_TERMS_SYSTEM_PROMPT

load_dotenv()

BACKEND = os.getenv("ZHENGYU_AI_BACKEND", "gemini") # openai, gemini

T = TypeVar('T', bound=BaseModel)

class CompletionClient:
    def __init__(
        self,
        backend: str = BACKEND,
        model_openai: Optional[str] = None,
        model_gemini: Optional[str] = None,
        system_instruction: str = PRESERVED_TERMS_SYSTEM_PROMPT,
        temperature: float = 0.0,
    ):
        self.model_openai = model_openai or os.getenv("ZHENGYU_OPENAI_MODEL", "gpt-4o-mini")
        self.model_gemini = model_gemini or os.getenv("ZHENGYU_GEMINI_MODEL", "gemini-2.5-flash")
        self.backend = backend.lower()
        self.system_instruction = system_instruction
        self.temperature = temperature

        if self.backend == "openai":
            self.client = OpenAI(
                api_key=os.getenv("OPENAI_API_KEY"),
                base_url=os.getenv("OPENAI_BASE_URL") or None,
            )
            self.model = self.model_openai
        elif self.backend == "gemini":
            self.client = genai.Client(api_key=os.getenv("GEMINI_KEY"))
            self.model = self.model_gemini
        else:
            raise ValueError(f"Unsupported backend: {backend}")

    def complete(self, prompt: str, response_schema: Optional[Type[T]] = None) -> str:
        """
        Send one non-streaming, stateless request and get the full reply.

        Args:
            prompt: The prompt to send to the model
            response_schema: Optional Pydantic model class that defines the expected response schema
        """
        if self.backend == "openai":
            resp = self.client.chat.completions.create(
                model=self.model_openai,
                messages=[
                    {"role": "system", "content": self.system_instruction},
                    {"role": "user", "content": prompt},
                ],
                response_format={"type": "json_object"},
                temperature=self.temperature,
            )
            return resp.choices[0].message.content or ""

        else:  # gemini
            config = {
                'system_instruction': self.system_instruction,
                'response_mime_type': 'application/json',
                'temperature': self.temperature,
            }

            if response_schema:
                config['response_schema'] = response_schema

            response = self.client.models.generate_content(
                model=self.model_gemini,
                contents=prompt,
                config=config
            )

            return response.text or ""
