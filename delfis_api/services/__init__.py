"""
Use cases for the Delfis API.

Each service orchestrates a repository to implement the rules of one entity
(lookups, normalization, partial updates, conflict translation). Routers call
these services instead of touching sessions or the document store directly.
"""
