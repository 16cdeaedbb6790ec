"""Application services for SGI Cidade."""
