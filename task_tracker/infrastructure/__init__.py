"""Infrastructure: implementations of application ports (persistence)."""
