"""Domain applications of the Trip Holiday backend."""
