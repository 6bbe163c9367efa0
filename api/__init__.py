"""
REST API for the Notice & MOM generator.
"""
