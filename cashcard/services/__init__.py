"""Service Layer — ownership guard and card operations over an injected CardStore.

Invariants:
    - Services receive their store through the constructor, never a global
    - Services never import FastAPI
"""
