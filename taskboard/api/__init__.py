"""Presentation layer: REST (v1) and WebSocket."""
