"""
Service layer abstraction.

``validation`` turns raw path segments and request bodies into typed
values; ``user_service`` applies the business rules on top of the
record store so that API handlers stay thin.
"""
