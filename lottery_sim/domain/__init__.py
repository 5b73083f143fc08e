"""Domain layer (pure logic).

- Keep weight tables and sampling rules here.
- Avoid I/O: no file access, no HTTP/FastAPI.
- Randomness is drawn from a thread-local generator unless one is passed in.
"""
