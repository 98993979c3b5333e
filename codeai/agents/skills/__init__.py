"""
Agent Skills Package

Skills are deterministic functions over text. They never touch the
database and never raise on unexpected input.
"""
