"""
models/ - Domain Models
=======================
Headline and category definitions shared by every layer.
"""
