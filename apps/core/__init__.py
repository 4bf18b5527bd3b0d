"""Cross-cutting HTTP concerns: error envelope, request logging, permissions."""
