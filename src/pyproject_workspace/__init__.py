"""pyproject-workspace: format-preserving manifest edits and Git object ids."""
