"""
Domain layer.

Entities, repository interfaces and the exception taxonomy shared by both demos.
"""
