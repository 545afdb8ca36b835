"""Concrete adapters for the interfaces in :mod:`songlist.interfaces`."""
