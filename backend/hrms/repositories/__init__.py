"""
HRMS Employee API — Repository Layer
======================================

What:  Storage access for the employee collection.

Repository Inventory:
    - EmployeeRepository (abstract): contract used by the service layer
    - MongoEmployeeRepository: MongoDB implementation (pymongo async API)
"""

from hrms.repositories.base import EmployeeRepository
from hrms.repositories.mongo import MongoEmployeeRepository

__all__ = ["EmployeeRepository", "MongoEmployeeRepository"]
