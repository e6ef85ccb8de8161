"""
Sample format handler plugins, each module registers itself on import
"""
