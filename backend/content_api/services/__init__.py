# Services package init
"""
Content API — Services Layer
==============================

Service Inventory:
    - paths: Path Resolver (token → Resource Path, MissingPathError on absence)
    - ContentService: Operation Dispatcher (create/list/update/delete/move)
"""
