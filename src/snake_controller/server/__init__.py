"""HTTP and WebSocket front-end for snake sessions."""
