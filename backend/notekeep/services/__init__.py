# Services package init
"""
Notekeep Backend — Services Layer
===================================

Service Inventory:
    - AuthService: password hashing and bearer tokens (auth_service.py)
"""
