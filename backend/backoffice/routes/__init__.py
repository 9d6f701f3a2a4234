# Routes package init
"""
Back Office Backend — API Routes Package
==========================================

Route Inventory:
    - catalogs.py:       bank entities, payment/receipt catalogs, expense
                         categories/subcategories/types, recurrence types
    - payment_plans.py:  /api/payment-plans
    - prospects.py:      /api/prospects (no auth)
    - unit_measures.py:  /api/unit-measures
    - health.py:         /health, /api/test/jwt-roles
    - responses.py:      envelope builders and outcome → status mapping

Design Principle:
    Routes are THIN: parse input, call one service, hand the outcome to
    `to_response`. Business rules live in services.
"""
