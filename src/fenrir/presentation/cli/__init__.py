"""Console front-end."""
