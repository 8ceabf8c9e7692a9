"""
Infrastructure Layer

Environment loading and logging shared by the matching engine.
"""
