"""Tierview: access-level aware projection of API resources."""
