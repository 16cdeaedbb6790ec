"""Infrastructure adapters, stubs and observability for SGI Cidade."""
