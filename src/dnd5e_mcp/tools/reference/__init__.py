"""
Reference Tools - one typed tool per API category.
"""
