"""Product Store service.

A FastAPI application exposing CRUD and filtered listing over product
records persisted with SQLModel.
"""

__version__ = "0.1.0"
