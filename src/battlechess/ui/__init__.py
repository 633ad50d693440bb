"""Qt-facing adapters for the display collaborator."""
