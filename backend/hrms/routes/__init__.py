# Routes package init
"""
HRMS Employee API — API Routes Package
========================================

Route Inventory:
    - employees.py:  GET    /employee        (list all employees)
                     POST   /employee        (create)
                     PUT    /employee/{id}   (overwrite)
                     DELETE /employee/{id}   (delete)
    - health.py:     GET    /health          (service health check)

Routes stay thin: extract input, call the service, return its result.
"""
