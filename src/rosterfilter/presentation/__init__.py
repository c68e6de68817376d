"""Presentation layer: session facade and pytest plugin."""
