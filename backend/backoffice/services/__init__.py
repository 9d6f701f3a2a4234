# Services package init
"""
Back Office Backend — Services Layer
======================================

What:  Business logic between routes (HTTP) and the database.
How:   Every public operation takes the request's AsyncSession and returns a
       `backoffice.results.Result` instead of raising for expected failures.

Service Inventory:
    - StoreService (base): logger injection, rollback + Unexpected on store errors
    - CatalogService: list/get/create over the reference catalogs
    - PaymentPlanService: owner-validated plans, lists, idempotent delete
    - ProspectService: public lead intake
    - UnitMeasureService: full CRUD
"""
