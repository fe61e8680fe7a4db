"""Controllers that build rounds and keep tournament statistics."""
