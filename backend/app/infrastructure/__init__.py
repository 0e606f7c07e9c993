"""
Infrastructure Layer
====================

Concrete adapters for the domain's repositories and ports:
MongoDB persistence, S3 blob storage and SMTP email.
"""
