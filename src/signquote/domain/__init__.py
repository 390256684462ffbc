"""Domain layer for signquote application.

Services are imported from their own modules (``signquote.domain.budget``,
``signquote.domain.project``) so that the database layer can import entities
without pulling the services in.
"""
