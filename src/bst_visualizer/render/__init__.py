"""Rendering of tree frames with matplotlib."""
