# Services package init
"""
HRMS Employee API — Services Layer
====================================

What:  Business logic layer sitting between routes (HTTP) and repositories
       (persistence).

Service Inventory:
    - EmployeeService: list / create / update / delete employees

Services never build HTTP responses; they return schemas or raise
application exceptions from hrms.exceptions.
"""
