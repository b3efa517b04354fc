# Routes package init
"""
Orphanage API — API Routes Package
===================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - employees.py:  /employees, /employees/{employee_id}   (5 operations)
    - children.py:   /children, /children/{child_id}        (5 operations)
    - health.py:     GET /health                            (not documented)
    - payload.py:    raw JSON body dependency shared by write routes

Design Principle:
    Routes are THIN. They pull the path id and body out of the request,
    call the resource service once, and wrap the result. Status codes for
    failures come from the exception handlers in main.py.
"""
