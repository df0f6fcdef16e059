"""
RPS - Result Processing System
Academic records backend.

Architecture:
- MongoDB: students, results, course listings
- FastAPI: JSON API under /api
"""

__version__ = "1.0.0"
