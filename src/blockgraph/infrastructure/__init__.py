"""Infrastructure layer — block file access and the reference resolver."""
