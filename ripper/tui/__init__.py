"""
Terminal UI package.
"""
