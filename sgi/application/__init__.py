"""Application layer for SGI Cidade.

Services orchestrating the domain (lifecycle engine, map controller,
ranker, notifications, authentication) and the ports they depend on.
"""
