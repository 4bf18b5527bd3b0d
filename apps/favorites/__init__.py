"""Customer favorite packages."""
