# Routes package init
"""
Site Content API — Routes Package
==================================

Route Inventory:
    - resources.py:  /api/admin/{projects,services,services-list,statistics,
                     team,ticker,shop/categories}   display-ordered content
    - contact.py:    POST /api/contact, /api/admin/contact-messages
    - auth.py:       /api/admin/auth/{login,me,logout}
    - users.py:      /api/users
    - images.py:     /api/images/{id}, /api/admin/images
    - storage.py:    /api/admin/blob-available
    - health.py:     /health

Routes stay thin: parse the request, call a service, shape the response.
Admin-only handlers take `Depends(require_admin)` ahead of the database
session.
"""
