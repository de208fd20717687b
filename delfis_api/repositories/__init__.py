"""
Persistence adapters.

These modules encapsulate how data is stored/retrieved (SQL for the relational
entities, a JSON document file for sudokus). Services depend on the
repositories rather than touching sessions or files.
"""
