"""
Agent Subagents Package

Subagents wrap external services behind a narrow interface.
"""
