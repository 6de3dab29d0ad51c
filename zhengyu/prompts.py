"""Prompts used for AI operations in the zhengyu package."""

PRESERVED_TERMS_SYSTEM_PROMPT = """You are a linguistic expert.
Please extract all **Nouns** (Common & Proper), **Pronouns**, and **Numerals** from the user input.
Output strictly valid JSON with the format: {"keywords": ["term1", "term2", ...]}.
Do NOT extract verbs, adjectives, adverbs, particles, or punctuation.

Example Input: "这是一个非常棒的UI改进方向"
Output: {"keywords": ["这", "一", "UI", "改进", "方向"]}

Example Input: "张三去香港食咗饭"
Output: {"keywords": ["张三", "香港", "饭"]}"""


def get_preserved_terms_prompt(text: str) -> str:
    return f"""
        # Task
        Extract the nouns, pronouns and numerals of the input text exactly as they are written.

        # Constraints
        - Only return the JSON output. Do not include any explanations, comments, or additional text.
        - Do not use markdown formatting or code blocks.
        - Every keyword must appear verbatim in the input text.

        # Input Text
        {text}
    """
