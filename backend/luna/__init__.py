"""
Luna - supportive AI companion chat backend.
"""
