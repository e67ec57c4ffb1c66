"""Cross-cutting utilities shared by every layer except the domain."""
