"""Failure translation for the simnode JSON-RPC provider."""
