"""CodeAI chat backend: web code generation over chat with project memory."""

__version__ = "1.0.0"
