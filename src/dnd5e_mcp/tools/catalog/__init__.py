"""
Catalog Tools - generic browsing, filtering and summarizing across categories.
"""
