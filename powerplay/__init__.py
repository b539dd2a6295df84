"""
Powerplay Cup - miniature cricket tournament simulation
"""
__version__ = "0.1.0"
