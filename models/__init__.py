"""
models/ - Domain Models
=======================
Plain dataclasses and enums shared by the repositories and services.
"""
