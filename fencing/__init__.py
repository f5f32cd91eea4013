"""
Fencing Tournament API

Responsibilities:
- Tournament, event, knockout stage and player records (CRUD)
- Player registration and rankings within events
- Bearer token authentication, ADMIN-only writes
"""
