"""Cipher implementations and their registry."""
