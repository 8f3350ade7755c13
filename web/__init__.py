"""Web layer: Flask request dispatcher, listener and bundled front-end files."""
