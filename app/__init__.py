"""Blog Publisher application package."""
