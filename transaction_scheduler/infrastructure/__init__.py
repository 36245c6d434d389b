"""
Infrastructure Layer - Adapters, database and seed data
"""
