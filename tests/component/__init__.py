"""
Component tests for the SE Shop API

Component tests drive the FastAPI app through TestClient with real routers,
services and repositories over an in-memory database.
"""
