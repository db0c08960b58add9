# Middleware package init
"""
Site Content API — Middleware Package
======================================

Request → [Request ID] → [Access Log] → [CORS] → Route Handler

The request id is assigned first so the access log line and any error body
can carry it. Contact form throttling is a route dependency
(rate_limit.limit_contact_submissions), not global middleware.
"""
