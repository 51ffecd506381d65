"""Toolkit for a desktop tool application: opened-file storage, XML configuration, themes, background tasks, networking and an update helper."""

__version__ = "0.0.16"