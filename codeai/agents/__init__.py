"""
Agents Package

- Skills: pure, reusable functions (template engine, parsing, extraction, preview)
- Subagents: specialized components with external dependencies (Cohere)
- Main Agent: orchestrates a reply stream and persists its outcome
"""
