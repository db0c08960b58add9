# Services package init
"""
Site Content API — Services Layer
==================================

Business rules between the routes (HTTP) and the database.

Service Inventory:
    - crud.ResourceService:       list / create / update / delete for one
                                  display-ordered table
    - resources:                  one configured ResourceService per content type
    - ContactService:             contact form submission and admin inbox
    - UserService:                credentials, current admin, provisioning
    - ImageService:               image lookup and blob registration
    - MailService:                best-effort contact form notification email

Services receive an AsyncSession per call and hold no per-request state,
so they can be unit-tested with a mocked session.
"""
