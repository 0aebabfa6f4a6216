"""ASGI adapter and development server for simplsite sites."""
