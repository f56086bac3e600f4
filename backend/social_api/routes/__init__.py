# Routes package init
"""
Social Media API Backend: API Routes Package
==============================================

Route Inventory:
    - accounts.py:  POST   /register
                    POST   /login
    - messages.py:  POST   /messages
                    GET    /messages
                    GET    /messages/{message_id}
                    DELETE /messages/{message_id}
                    PATCH  /messages/{message_id}
                    GET    /accounts/{account_id}/messages
    - health.py:    GET    /health

Each module declares a ROUTES table of (method, path, handler, options) and
registers it on its APIRouter with add_api_route.

Routes are thin: decode the body, call a service, and map None results to
the status code for that operation (400/401/409) by raising the matching
application exception.
"""
