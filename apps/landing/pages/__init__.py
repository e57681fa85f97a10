"""Register NiceGUI pages by importing submodules."""

from . import admin, landing  # noqa: F401

__all__ = ["admin", "landing"]
