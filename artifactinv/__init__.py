"""Inventory of archaeological artifacts with CSV, JSON or in-memory storage, filters, undo/redo and a command shell."""

__version__ = "0.1.0"