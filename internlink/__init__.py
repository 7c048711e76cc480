"""
InternLink
An internship marketplace connecting students, employers and colleges.

Architecture:
- In-memory repository: users, profiles, jobs, applications, messages
- Match score store: in memory or SQL (SQLAlchemy)
- Matching: skill-set overlap scoring and top-N ranking in both directions
"""

__version__ = "1.0.0"
