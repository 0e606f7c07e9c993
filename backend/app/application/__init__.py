"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (register driver, update application status, etc.)
- Services: Application services that coordinate multiple use cases
"""

