"""
Portal components
"""
