"""
Site Content API
================

Backend for a marketing site and its admin panel: display-ordered content
(projects, services, statistics, team, ticker, shop categories), a public
contact form with an admin inbox, admin sessions, and image serving.

    ┌─────────────────────────────────────┐
    │  routes/      HTTP, auth guard      │
    ├─────────────────────────────────────┤
    │  services/    business rules        │
    ├─────────────────────────────────────┤
    │  models/ schemas/  ORM + contracts  │
    ├─────────────────────────────────────┤
    │  database.py  async sessions        │
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
