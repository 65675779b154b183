"""
Core infrastructure shared by every layer: settings, logging setup,
database connections and the error taxonomy.
"""
