"""Shared helpers for :mod:`public24`."""
