import json
import re

CODE_BLOCK_PATTERN = re.compile(r"```(?:json)?\n?(.*?)```", re.DOTALL)


def strip_code_fences(text):
    """
    Pull the JSON payload out of a model reply.

    When the reply contains fenced blocks, their trimmed contents are joined
    with newlines. Otherwise any stray ``` markers are removed.
    """
    if not text:
        return text

    parts = [match.strip() for match in CODE_BLOCK_PATTERN.findall(text)]
    if parts:
        return "\n".join(parts).strip()

    return text.replace("```", "").strip()


def parse_model_json(text):
    """Normalize a model reply and decode it. Raises json.JSONDecodeError."""
    return json.loads(strip_code_fences(text) or "")
