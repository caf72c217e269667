"""Reddit Media Viewer application package."""
