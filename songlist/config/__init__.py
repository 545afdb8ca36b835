"""Configuration module — exports Settings."""

from songlist.config.settings import Settings

__all__ = ["Settings"]
