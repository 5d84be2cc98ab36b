"""Command-line interface for SkillHub."""
