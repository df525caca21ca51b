"""Core building blocks: results, theory adapter, LLM client, prompts and parsing."""
