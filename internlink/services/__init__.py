"""
Services - matching and profile scoring logic.
"""
