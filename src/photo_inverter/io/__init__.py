"""Decoding and encoding helpers used by the command line host."""
