# Services package init
"""
Orphanage API — Services Package
=================================

    - resource_service.py: ResourceService plus the employee_service and
      child_service instances used by the routes
"""
