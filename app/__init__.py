"""
Job Board Platform
Recruiters post jobs, students browse, apply and follow companies.

Architecture:
- FastAPI: REST API under /api
- MongoDB: users, companies, jobs, applications, follow requests
- Local disk: uploaded resumes, served from /uploads
"""

__version__ = "1.0.0"
