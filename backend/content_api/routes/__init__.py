# Routes package init
"""
Content API — Routes Package
==============================

Route Inventory:
    - content.py: GET/POST/PUT/DELETE /content/...   (content tree operations)
    - health.py:  GET /health                        (service health check)

Routes are THIN: they extract the path token, body and query parameters,
call ContentService, and shape the success response. Validation and storage
dispatch live in services.
"""
