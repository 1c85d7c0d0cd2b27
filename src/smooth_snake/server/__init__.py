"""HTTP and WebSocket host for remote renderers."""
